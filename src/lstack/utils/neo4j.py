"""
Neo4j connection utilities.

Provides standardized configuration loading and driver management
for connecting to the Neo4j server that hosts the stack procedures.
"""

import os
from typing import Any, Dict, Optional

from lstack.core.errors import InvalidArgumentError

__all__ = ["get_config", "get_driver", "get_session"]


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise InvalidArgumentError(f"LSTACK_TIMEOUT is not a number: {raw!r}") from e


def get_config() -> Dict[str, Any]:
    """
    Load connection configuration from environment variables.

    Returns:
        Dictionary with uri, user, password, database, namespace and timeout

    Raises:
        InvalidArgumentError: If LSTACK_TIMEOUT is set but not numeric
    """
    return {
        "uri": os.environ.get("NEO4J_URI", "bolt://localhost:7687"),
        "user": os.environ.get("NEO4J_USER", "neo4j"),
        "password": os.environ.get("NEO4J_PASSWORD", "password"),
        "database": os.environ.get("NEO4J_DATABASE", "neo4j"),
        "namespace": os.environ.get("LSTACK_NAMESPACE", "test"),
        "timeout": _parse_timeout(os.environ.get("LSTACK_TIMEOUT")),
    }


def get_driver(uri: Optional[str] = None, user: Optional[str] = None,
               password: Optional[str] = None):
    """
    Create a Neo4j driver instance.

    Args:
        uri: Neo4j bolt URI (uses NEO4J_URI env var if not provided)
        user: Username (uses NEO4J_USER env var if not provided)
        password: Password (uses NEO4J_PASSWORD env var if not provided)

    Returns:
        Neo4j driver instance
    """
    from neo4j import GraphDatabase

    config = get_config()
    return GraphDatabase.driver(
        uri or config["uri"],
        auth=(user or config["user"], password or config["password"])
    )


def get_session(driver, database: Optional[str] = None):
    """
    Open a session on the database that hosts the stack procedures.

    Args:
        driver: Neo4j driver instance
        database: Database name (uses NEO4J_DATABASE env var if not provided)

    Returns:
        Neo4j session, usable as a context manager
    """
    if database is None:
        database = get_config()["database"]
    return driver.session(database=database)
