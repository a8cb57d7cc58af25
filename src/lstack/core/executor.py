"""
Remote execution of server-resident stack functions.

RemoteExecutor is the single capability the stack client depends on: run a
named function in a named package against one record and return its result.
Neo4jExecutor implements it by calling the function as a Neo4j procedure.

Usage:
    from lstack.core.executor import Neo4jExecutor

    with Neo4jExecutor() as executor:
        executor.execute(None, key, "lstack", "size", Value.get("bin"))
"""

import numbers
import re
import sys
from typing import Any, Optional, Protocol

from neo4j import Query
from neo4j.exceptions import DriverError, Neo4jError

from lstack.core.errors import DecodeError, InvalidArgumentError, RemoteOperationError
from lstack.core.records import Key, WritePolicy
from lstack.core.values import Value
from lstack.utils.neo4j import get_config, get_driver, get_session

__all__ = ["RemoteExecutor", "Neo4jExecutor", "build_call_query", "to_int"]

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class RemoteExecutor(Protocol):
    """Anything that can run a server-resident function against a record."""

    def execute(self, policy: Optional[WritePolicy], key: Key, package_name: str,
                function_name: str, *args: Value) -> Any:
        ...


def to_int(result: Any) -> int:
    """
    Coerce a raw numeric result to int.

    Accepts integers of any width and integral floats.

    Raises:
        DecodeError: If the result is missing or not numeric
    """
    if result is None or isinstance(result, bool):
        raise DecodeError(f"Expected numeric result, got {result!r}", result)
    if isinstance(result, numbers.Integral):
        return int(result)
    if isinstance(result, float) and result.is_integer():
        return int(result)
    raise DecodeError(
        f"Expected numeric result, got {type(result).__name__}", result
    )


def build_call_query(package_name: str, function_name: str) -> str:
    """Build the procedure call for package.function."""
    for name in (package_name, function_name):
        if not name or not IDENTIFIER_PATTERN.match(name):
            raise InvalidArgumentError(f"Invalid package or function name: {name!r}")
    return (
        f"CALL {package_name}.{function_name}"
        "($namespace, $set_name, $digest, $user_key, $args) "
        "YIELD result RETURN result"
    )


class Neo4jExecutor:
    """Executes stack functions as procedures on a Neo4j server."""

    def __init__(self, driver=None, database: Optional[str] = None, verbose: bool = False):
        """
        Initialize the executor.

        Args:
            driver: Existing Neo4j driver (created from env config if omitted)
            database: Target database (default: NEO4J_DATABASE)
            verbose: Print each call to stderr
        """
        self.database = database or get_config()["database"]
        self.verbose = verbose
        self._driver = driver
        self._owns_driver = driver is None

    @property
    def driver(self):
        if self._driver is None:
            self._driver = get_driver()
        return self._driver

    def close(self):
        if self._driver and self._owns_driver:
            self._driver.close()
            self._driver = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def execute(self, policy: Optional[WritePolicy], key: Key, package_name: str,
                function_name: str, *args: Any) -> Any:
        """
        Run package.function against the record identified by key.

        Returns:
            The procedure's single result value, or None if it yielded nothing

        Raises:
            RemoteOperationError: On any server or driver failure
            InvalidArgumentError: If an operand cannot be serialized by the
                driver (non-string map keys, integers outside 64 bits)
        """
        text = build_call_query(package_name, function_name)
        parameters = {
            "namespace": key.namespace,
            "set_name": key.set_name,
            "digest": key.digest,
            "user_key": key.user_key,
            "args": [Value.get(arg).to_object() for arg in args],
        }
        timeout = policy.timeout if policy else None
        metadata = dict(policy.metadata) if policy and policy.metadata else None

        if self.verbose:
            print(f"  -> {package_name}.{function_name} "
                  f"ns={key.namespace} digest={key.digest} args={len(args)}",
                  file=sys.stderr)

        try:
            with get_session(self.driver, self.database) as session:
                result = session.run(
                    Query(text, metadata=metadata, timeout=timeout), parameters
                )
                record = result.single()
        except Neo4jError as e:
            raise RemoteOperationError(e.message or str(e), code=e.code) from e
        except DriverError as e:
            raise RemoteOperationError(str(e)) from e
        except (TypeError, ValueError, OverflowError) as e:
            # raised by the driver when packing parameters, before anything is sent
            raise InvalidArgumentError(f"Operand cannot be sent: {e}") from e

        if record is None:
            return None
        return record["result"]
