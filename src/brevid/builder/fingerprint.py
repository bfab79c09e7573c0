"""Fixed-width numeric fingerprints of arbitrary strings."""
from __future__ import annotations

import hashlib

from ..utils.constants import MAX_HEX_INT_WIDTH


def hash_to_fixed_digits(value: str, digits: int) -> int:
    """Reduce *value* to an integer with exactly *digits* decimal digits.

    The SHA-256 digest of *value* is truncated to ``MAX_HEX_INT_WIDTH`` hex
    characters, reduced modulo ``10**digits`` and lifted into
    ``[10**(digits-1), 10**digits)`` when the reduction lost leading digits. Surrogate escapes, as produced
    for undecodable hostnames, are hashed as the original bytes.
    """

    if isinstance(digits, bool) or not isinstance(digits, int) or not 1 <= digits <= MAX_HEX_INT_WIDTH:
        raise ValueError(f"numDigits must be between 1 and {MAX_HEX_INT_WIDTH}")

    digest = hashlib.sha256(value.encode("utf-8", "surrogateescape")).hexdigest()
    numeric = int(digest[:MAX_HEX_INT_WIDTH], 16)

    reduced = numeric % 10**digits
    floor = 10 ** (digits - 1)
    if reduced < floor:
        reduced += floor
    return reduced


__all__ = ["hash_to_fixed_digits"]
