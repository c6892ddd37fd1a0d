"""
Collision resolution for generated resource names.

Turns a candidate name into one that is unclaimed and conforms to its
resource class rules, using a bounded number of suffix attempts.
"""

import hashlib
import logging
import string
from collections.abc import Collection

from infra_config.configs.constants import NAMING_RULES, CollisionStrategy, ResourceClass
from infra_config.core.exceptions import (
    NamingConflictError,
    NameTooLongError,
    UnresolvableCollisionError,
)

logger = logging.getLogger(__name__)

_BASE36_ALPHABET = string.digits + string.ascii_lowercase
SHORT_HASH_LENGTH = 6


def short_hash(value: str) -> str:
    """
    Compute a stable 6-character base-36 digest.

    Derived from SHA-256, so the digest is stable across processes.

    Args:
        value: Input string to hash

    Returns:
        Lowercase base-36 string of exactly six characters
    """
    number = int.from_bytes(hashlib.sha256(value.encode("utf-8")).digest()[:8], "big")
    digits = []
    for _ in range(SHORT_HASH_LENGTH):
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def _is_available(name: str, resource_class: ResourceClass, existing: Collection[str]) -> bool:
    return name not in existing and NAMING_RULES[resource_class].matches(name)


def resolve_collision(
    candidate: str,
    resource_class: ResourceClass,
    existing: Collection[str],
    strategy: CollisionStrategy = CollisionStrategy.NUMERIC_SUFFIX,
    max_attempts: int = 10,
) -> str:
    """
    Produce a unique, rule-conformant name for a candidate.

    Args:
        candidate: Stage-qualified name to make unique
        resource_class: Resource class whose rules apply
        existing: Names already claimed
        strategy: How to derive alternatives
        max_attempts: Maximum number of alternatives to try

    Returns:
        The candidate itself when available, otherwise the first available alternative

    Raises:
        NameTooLongError: If the candidate already exceeds the class limit
        NamingConflictError: If the candidate is unavailable and strategy is ERROR
        UnresolvableCollisionError: If every attempt is unavailable
    """
    max_length = NAMING_RULES[resource_class].max_length
    # Suffixes only make a name longer
    if len(candidate) > max_length:
        raise NameTooLongError(candidate, resource_class.value, max_length)

    if _is_available(candidate, resource_class, existing):
        return candidate

    for attempt in range(1, max_attempts + 1):
        if strategy is CollisionStrategy.NUMERIC_SUFFIX:
            alternative = f"{candidate}-{attempt}"
        elif strategy is CollisionStrategy.HASH_SUFFIX:
            alternative = f"{candidate}-{short_hash(f'{candidate}{attempt}')}"
        elif strategy is CollisionStrategy.ERROR:
            raise NamingConflictError(candidate)
        else:
            raise ValueError(f"Unsupported collision strategy: {strategy!r}")

        if _is_available(alternative, resource_class, existing):
            logger.info(f"Resolved naming collision for '{candidate}' as '{alternative}'")
            return alternative

    raise UnresolvableCollisionError(candidate, max_attempts)
