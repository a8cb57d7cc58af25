"""
Shared utilities for the lstack package.

- hashing: Record key digest computation
- neo4j: Database connection and session management
"""

from lstack.utils.hashing import compute_key_digest
from lstack.utils.neo4j import get_config, get_driver, get_session

__all__ = [
    "compute_key_digest",
    "get_config",
    "get_driver",
    "get_session",
]
