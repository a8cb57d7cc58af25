"""
Record identity and per-call configuration.

Key names a single record (namespace + set + user key); WritePolicy carries
optional settings the executor applies to one remote call.
"""

import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from lstack.core.errors import InvalidArgumentError
from lstack.utils.hashing import compute_key_digest

__all__ = ["Key", "WritePolicy", "policy_from_config"]


@dataclass(frozen=True)
class Key:
    """Unique record identifier."""
    namespace: str
    set_name: Optional[str]
    user_key: Any

    def __post_init__(self):
        if not self.namespace:
            raise InvalidArgumentError("Key namespace is required")
        if self.user_key is None:
            raise InvalidArgumentError("Key user_key is required")
        try:
            digest = compute_key_digest(self.set_name, self.user_key)
        except TypeError as e:
            raise InvalidArgumentError(str(e)) from e
        object.__setattr__(self, "_digest", digest)

    @property
    def digest(self) -> str:
        """Hex digest of (set_name, user_key)."""
        return self._digest


@dataclass(frozen=True)
class WritePolicy:
    """
    Generic configuration for one remote call.

    timeout is in seconds; None leaves the executor's default in place.
    metadata is attached to the remote transaction as-is. Policies compare
    by value but are not hashable, since metadata is a dict.
    """
    timeout: Optional[float] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    __hash__ = None

    def __post_init__(self):
        if self.timeout is None:
            return
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, numbers.Real):
            raise InvalidArgumentError(
                f"Policy timeout must be a number, got {type(self.timeout).__name__}"
            )
        if self.timeout <= 0:
            raise InvalidArgumentError("Policy timeout must be positive")


def policy_from_config(config: Dict[str, Any]) -> Optional[WritePolicy]:
    """
    Build a WritePolicy from a config dict (see lstack.utils.neo4j.get_config).

    Returns None when the config asks for nothing beyond defaults.
    """
    timeout = config.get("timeout")
    if timeout is None:
        return None
    return WritePolicy(timeout=timeout)
