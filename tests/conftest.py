"""Pytest configuration and shared fixtures."""

import pytest

from lstack.core.errors import RemoteOperationError
from lstack.core.records import Key
from lstack.core.stack import LargeStack


class InMemoryExecutor:
    """
    Executor double that runs the "lstack" package in process.

    Stacks are kept per (namespace, set, digest, bin). Reads against a
    missing bin fail with RemoteOperationError; destroy of a missing bin is
    a no-op. Every call is recorded in self.calls.
    """

    DEFAULT_CAPACITY = 0  # unlimited

    def __init__(self, filters=None):
        self.stacks = {}
        self.calls = []
        self.filters = filters or {}

    def execute(self, policy, key, package_name, function_name, *args):
        self.calls.append((policy, key, package_name, function_name, args))
        if package_name != "lstack":
            raise RemoteOperationError(f"Unknown package: {package_name}", code="UDF_NOT_FOUND")
        handler = getattr(self, "_" + function_name, None)
        if handler is None:
            raise RemoteOperationError(f"Unknown function: {function_name}", code="UDF_NOT_FOUND")
        bin_name, *rest = [arg.to_object() for arg in args]
        slot = (key.namespace, key.set_name, key.digest, bin_name)
        return handler(slot, *rest)

    def _existing(self, slot):
        if slot not in self.stacks:
            raise RemoteOperationError("Bin not found", code="BIN_NOT_FOUND")
        return self.stacks[slot]

    def _create(self, slot, create_module):
        if slot not in self.stacks:
            self.stacks[slot] = {
                "items": [],
                "capacity": self.DEFAULT_CAPACITY,
                "create_module": create_module,
            }
        return self.stacks[slot]

    def _append(self, stack, values):
        stack["items"].extend(values)
        capacity = stack["capacity"]
        if capacity and len(stack["items"]) > capacity:
            del stack["items"][:len(stack["items"]) - capacity]

    def _push(self, slot, value, create_module):
        self._append(self._create(slot, create_module), [value])

    def _push_all(self, slot, values, create_module):
        self._append(self._create(slot, create_module), values)

    def _peek(self, slot, count):
        return list(reversed(self._existing(slot)["items"]))[:count]

    def _scan(self, slot):
        return list(reversed(self._existing(slot)["items"]))

    def _filter(self, slot, count, module, name, filter_args):
        func = self.filters.get((module, name))
        if func is None:
            raise RemoteOperationError(f"Unknown filter: {module}.{name}", code="UDF_NOT_FOUND")
        return [item for item in self._peek(slot, count) if func(item, *filter_args)]

    def _destroy(self, slot):
        self.stacks.pop(slot, None)

    def _size(self, slot):
        return len(self._existing(slot)["items"])

    def _get_config(self, slot):
        stack = self._existing(slot)
        return {
            "SUMMARY": "LStack Summary",
            "Capacity": stack["capacity"],
            "ItemCount": len(stack["items"]),
            "CreateModule": stack["create_module"],
        }

    def _set_capacity(self, slot, capacity):
        self._existing(slot)["capacity"] = capacity

    def _get_capacity(self, slot):
        return self._existing(slot)["capacity"]


class StubExecutor:
    """Executor double that returns a fixed result and records calls."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def execute(self, policy, key, package_name, function_name, *args):
        self.calls.append((policy, key, package_name, function_name, args))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def key():
    """Record key used by most tests."""
    return Key("test", "demo", "stack-key")


@pytest.fixture
def executor():
    """In-memory executor with a couple of filters registered."""
    return InMemoryExecutor(filters={
        ("filters", "greater_than"): lambda item, bound: item > bound,
        ("filters", "even"): lambda item: item % 2 == 0,
    })


@pytest.fixture
def stack(executor, key):
    """Stack handle backed by the in-memory executor."""
    return LargeStack(executor, None, key, "events")


@pytest.fixture
def stub_executor():
    """Factory for executors that return a fixed result or raise."""
    return StubExecutor
