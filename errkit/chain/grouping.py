"""Grouping hasher: a short, stable ID for the shape of an error chain.

Only kind descriptors feed the hash. Parameters and the leaf message are
dropped, so every occurrence of the same wrapping structure lands in the same
bucket no matter which file, user or timestamp it carried. The prefix is short
on purpose; a collision merges two shapes into one bucket, nothing worse.
"""

from __future__ import annotations

import hashlib

from errkit.core.config import DEFAULT_ALGORITHM, DEFAULT_ID_LENGTH, DEFAULT_SEPARATOR

from .model import ErrorChain

__all__ = ["skeleton", "grouping_id", "hash_skeleton"]


def skeleton(chain: ErrorChain, *, separator: str = DEFAULT_SEPARATOR) -> str:
    """Kind descriptors joined in chain order, e.g. "A.x|B.y|C [Struct]".

    A separator or backslash inside a kind is backslash-escaped, so ("A|B",)
    and ("A", "B") give different skeletons.

    Raises:
        ValueError: If the separator is empty.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    return separator.join(_escape(kind, separator) for kind in chain.kinds)


def _escape(kind: str, separator: str) -> str:
    return kind.replace("\\", "\\\\").replace(separator, "\\" + separator)


def hash_skeleton(
    text: str,
    *,
    length: int = DEFAULT_ID_LENGTH,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Lowercase hex prefix of the digest of `text` encoded as UTF-8.

    Raises:
        ValueError: If the algorithm is unknown or variable-length, or the
            length does not fit the digest.
    """
    try:
        digest = hashlib.new(algorithm, text.encode("utf-8"))
    except ValueError as e:
        raise ValueError(f"unknown hash algorithm: {algorithm}") from e
    if digest.digest_size == 0:
        raise ValueError(f"variable-length hash not supported: {algorithm}")
    full = digest.hexdigest()
    if not 1 <= length <= len(full):
        raise ValueError(f"length must be between 1 and {len(full)}, got {length}")
    return full[:length]


def grouping_id(
    chain: ErrorChain,
    *,
    length: int = DEFAULT_ID_LENGTH,
    algorithm: str = DEFAULT_ALGORITHM,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    return hash_skeleton(skeleton(chain, separator=separator), length=length, algorithm=algorithm)
