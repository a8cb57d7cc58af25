"""
Record key hashing utilities.

A record is addressed by a digest of its set name and user key rather than
by the raw user key. Uses SHA-256 truncated to 160 bits (40 hex chars).
"""

import hashlib
from typing import Any, Optional

__all__ = ["compute_key_digest", "encode_key_for_hash"]


def encode_key_for_hash(user_key: Any) -> str:
    """
    Encode a user key for hashing with type safety.

    The type prefix keeps keys with the same string representation apart
    (e.g., integer 42 vs string "42").

    Args:
        user_key: Integer, string or bytes user key

    Returns:
        String of the form "{kind}:{value}"

    Raises:
        TypeError: If the key type cannot be used as a record key
    """
    # bool is an int subclass and is not a valid key
    if isinstance(user_key, bool):
        raise TypeError("Boolean record keys are not supported")
    if isinstance(user_key, int):
        return f"integer:{user_key}"
    if isinstance(user_key, str):
        return f"string:{user_key}"
    if isinstance(user_key, (bytes, bytearray)):
        return f"bytes:{bytes(user_key).hex()}"
    raise TypeError(f"Unsupported record key type: {type(user_key).__name__}")


def compute_key_digest(set_name: Optional[str], user_key: Any) -> str:
    """
    Compute the digest that identifies a record within a namespace.

    Hash format: SHA-256 of "{set_name}|{kind}:{value}" truncated to 160 bits.

    Args:
        set_name: Set name, None or empty for the namespace's default set
        user_key: Integer, string or bytes user key

    Returns:
        40 hex characters
    """
    content = f"{set_name or ''}|{encode_key_for_hash(user_key)}"
    return hashlib.sha256(content.encode()).hexdigest()[:40]
