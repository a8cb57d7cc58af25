"""
lstack - Client for LIFO stacks stored in a single bin of a remote record.

This package provides:
- LargeStack handle for push/peek/scan/filter/size/capacity operations
- Typed operand values and record keys
- Remote execution of the server-side "lstack" package over Neo4j
- A command-line interface for ad-hoc stack inspection
"""

__version__ = "0.1.0"
__author__ = "lstack Project"

from .core import (
    DecodeError,
    InvalidArgumentError,
    Key,
    LargeStack,
    LargeStackError,
    Neo4jExecutor,
    RemoteExecutor,
    RemoteOperationError,
    Value,
    WritePolicy,
)
from .utils.neo4j import get_config, get_driver

__all__ = [
    "__version__",
    "DecodeError",
    "InvalidArgumentError",
    "Key",
    "LargeStack",
    "LargeStackError",
    "Neo4jExecutor",
    "RemoteExecutor",
    "RemoteOperationError",
    "Value",
    "WritePolicy",
    "get_config",
    "get_driver",
]
