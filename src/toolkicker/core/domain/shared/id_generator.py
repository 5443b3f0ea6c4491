"""Identifier and clock helpers shared by the stores.

Ids are the base36 millisecond timestamp followed by a random base36
suffix, so ids created later sort later at millisecond resolution and ids
created within the same millisecond still differ.
"""

import secrets
import time

_BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_SUFFIX_LENGTH = 8


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("base36 encoding expects a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def now_millis() -> int:
    return time.time_ns() // 1_000_000


def new_id() -> str:
    suffix = to_base36(secrets.randbelow(36**_SUFFIX_LENGTH)).rjust(_SUFFIX_LENGTH, "0")
    return to_base36(now_millis()) + suffix
