"""
Large stack - a LIFO stack stored within a single bin of a record.

All stack logic runs on the server in the "lstack" package. LargeStack only
builds the calls, forwards operands and checks the shape of what comes back.

Usage:
    from lstack import Key, LargeStack, Neo4jExecutor

    with Neo4jExecutor() as executor:
        stack = LargeStack(executor, None, Key("test", "demo", "k1"), "events")
        stack.push("a", "b", "c")
        stack.peek(1)   # ["c"]
"""

from typing import Any, Dict, List, Optional, Sequence

from lstack.core.errors import DecodeError, InvalidArgumentError
from lstack.core.executor import RemoteExecutor, to_int
from lstack.core.records import Key, WritePolicy
from lstack.core.values import Value

__all__ = ["LargeStack", "PACKAGE_NAME"]

PACKAGE_NAME = "lstack"


def _check_count(name: str, count: int, minimum: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {count!r}")
    if count < minimum:
        raise InvalidArgumentError(f"{name} must be >= {minimum}, got {count}")


def _as_list(result: Any, function_name: str) -> List[Any]:
    if not isinstance(result, list):
        raise DecodeError(
            f"{function_name}: expected list result, got {type(result).__name__}",
            result,
        )
    return result


class LargeStack:
    """
    Create and manage a stack within a single bin. A stack is last in/first out.

    The handle holds no stack state of its own; every method is one remote
    call and any failure from the executor propagates unchanged.
    """

    def __init__(self, client: RemoteExecutor, policy: Optional[WritePolicy],
                 key: Key, bin_name: str, create_module: Optional[str] = None):
        """
        Initialize large stack operator.

        Args:
            client: Remote executor
            policy: Generic configuration parameters, None for defaults
            key: Unique record identifier
            bin_name: Bin name
            create_module: Server function that initializes stack configuration
                on first push, None for the default set
        """
        if client is None:
            raise InvalidArgumentError("client is required")
        if key is None:
            raise InvalidArgumentError("key is required")
        if not bin_name:
            raise InvalidArgumentError("bin_name is required")

        self._client = client
        self._policy = policy
        self._key = key
        self._bin_name = bin_name
        self._bin_value = Value.get(bin_name)
        self._create_module = create_module
        self._create_value = Value.get(create_module)

    @property
    def client(self) -> RemoteExecutor:
        return self._client

    @property
    def policy(self) -> Optional[WritePolicy]:
        return self._policy

    @property
    def key(self) -> Key:
        return self._key

    @property
    def bin_name(self) -> str:
        return self._bin_name

    @property
    def create_module(self) -> Optional[str]:
        return self._create_module

    def __repr__(self) -> str:
        return f"LargeStack(key={self._key!r}, bin_name={self._bin_name!r})"

    def _execute(self, function_name: str, *args: Value) -> Any:
        return self._client.execute(
            self._policy, self._key, PACKAGE_NAME, function_name,
            self._bin_value, *args
        )

    # =========================================================================
    # Mutation
    # =========================================================================

    def push(self, *values: Any) -> None:
        """
        Push one or more values onto the stack.

        A single value is pushed as-is (a list argument becomes one element).
        Several values are pushed in order, so the last one ends on top.
        If the stack does not exist, it is created using create_module.
        """
        if not values:
            raise InvalidArgumentError("push requires at least one value")
        if len(values) > 1:
            self.push_all(values)
            return
        self._execute("push", Value.get(values[0]), self._create_value)

    def push_all(self, values: Sequence[Any]) -> None:
        """
        Push a sequence of values onto the stack.

        Equivalent to pushing each value in turn: values[-1] ends on top.
        If the stack does not exist, it is created using create_module.
        """
        self._execute("push_all", Value.get(list(values)), self._create_value)

    def destroy(self) -> None:
        """Delete bin containing the stack."""
        self._execute("destroy")

    def set_capacity(self, capacity: int) -> None:
        """
        Set maximum number of entries for the stack.

        Args:
            capacity: Max entries, must be positive
        """
        _check_count("capacity", capacity, 1)
        self._execute("set_capacity", Value.get(capacity))

    # =========================================================================
    # Reads
    # =========================================================================

    def peek(self, peek_count: int) -> List[Any]:
        """
        Select items from top of stack.

        Args:
            peek_count: Number of items to select

        Returns:
            Up to peek_count items, top of stack first
        """
        _check_count("peek_count", peek_count, 0)
        return _as_list(self._execute("peek", Value.get(peek_count)), "peek")

    def scan(self) -> List[Any]:
        """Return list of all objects on the stack, top first."""
        return _as_list(self._execute("scan"), "scan")

    def filter(self, peek_count: int, filter_module: Optional[str],
               filter_name: Optional[str], *filter_args: Any) -> List[Any]:
        """
        Select items from top of stack that pass a server-side filter.

        Args:
            peek_count: Number of items to select
            filter_module: Server module containing the filter function
            filter_name: Filter function applied to the selected items
            filter_args: Extra arguments to the filter function

        Returns:
            Items kept by the filter
        """
        _check_count("peek_count", peek_count, 0)
        result = self._execute(
            "filter",
            Value.get(peek_count),
            Value.get(filter_module),
            Value.get(filter_name),
            Value.get(list(filter_args)),
        )
        return _as_list(result, "filter")

    def size(self) -> int:
        """Return size of stack."""
        return to_int(self._execute("size"))

    def get_config(self) -> Dict[Any, Any]:
        """Return map of stack configuration parameters."""
        result = self._execute("get_config")
        if not isinstance(result, dict):
            raise DecodeError(
                f"get_config: expected map result, got {type(result).__name__}",
                result,
            )
        return result

    def get_capacity(self) -> int:
        """Return maximum number of entries for the stack."""
        return to_int(self._execute("get_capacity"))
