"""
Username Generation

Usernames are derived from the user's name at signup:

    "Ada", "Smith"      → adasmith
    (adasmith taken)    → adasmith1
    (… and adasmith1)   → adasmith2
    "Zoë", "O'Neil"     → zooneil
    "!!", "??"          → user

The unique index on users.username is the final guard against two
concurrent signups picking the same name.
"""

import re
from typing import Iterable


_NON_ALNUM = re.compile(r"[^a-z0-9]")

FALLBACK_USERNAME = "user"


def base_username(first_name: str, last_name: str) -> str:
    """Lower-cased first+last name with everything but [a-z0-9] removed."""
    base = _NON_ALNUM.sub("", f"{first_name}{last_name}".lower())
    return base or FALLBACK_USERNAME


def next_available_username(base: str, taken: Iterable[str]) -> str:
    """
    Pick ``base`` if free, else ``base{n}`` for the smallest free n >= 1.

    Args:
        base: Generated base username
        taken: Usernames already in use (only those starting with base matter)
    """
    taken_set = set(taken)
    if base not in taken_set:
        return base

    suffix = 1
    while f"{base}{suffix}" in taken_set:
        suffix += 1
    return f"{base}{suffix}"
