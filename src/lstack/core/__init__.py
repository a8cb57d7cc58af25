"""
Core stack client.

This module provides the client side of server-resident stacks:
- stack: LargeStack handle exposing the stack operations
- executor: Remote execution capability and its Neo4j implementation
- values: Typed operand values
- records: Record keys and call policies
- errors: Exception taxonomy
"""

from lstack.core.errors import (
    DecodeError,
    InvalidArgumentError,
    LargeStackError,
    RemoteOperationError,
)
from lstack.core.executor import Neo4jExecutor, RemoteExecutor, to_int
from lstack.core.records import Key, WritePolicy, policy_from_config
from lstack.core.stack import LargeStack
from lstack.core.values import Value, ValueType

__all__ = [
    "DecodeError",
    "InvalidArgumentError",
    "LargeStackError",
    "RemoteOperationError",
    "Neo4jExecutor",
    "RemoteExecutor",
    "to_int",
    "Key",
    "WritePolicy",
    "policy_from_config",
    "LargeStack",
    "Value",
    "ValueType",
]
