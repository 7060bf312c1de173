# parser/literals.py

import re
from typing import Optional

from cdefines_enum.parser.primitives import NATIVE_UINT_MAX

# ——— Radix prefixes, checked in order ———
# "0" has to come last so that "0x"/"0b" win over the octal prefix.
RADIX_PREFIXES = (
    ("0x", 16, re.compile(r"[0-9a-fA-F]+")),
    ("0b", 2,  re.compile(r"[01]+")),
    ("0",  8,  re.compile(r"[0-7]*")),
)
DECIMAL_RE = re.compile(r"[0-9]+")


def parse_value(token: str) -> Optional[int]:
    """
    Parse a C integer literal token into an unsigned integer.

    Hex (0x), binary (0b), octal (leading 0) and decimal are recognized.
    Returns None when the token is not a literal this parser accepts, which
    callers treat as "maybe a reference to another define".
    """
    for prefix, base, digits_re in RADIX_PREFIXES:
        if token.startswith(prefix):
            digits = token[len(prefix):]
            break
    else:
        base, digits, digits_re = 10, token, DECIMAL_RE

    if not digits_re.fullmatch(digits):
        return None

    # a bare "0" leaves no octal digits behind
    value = int(digits, base) if digits else 0
    if value > NATIVE_UINT_MAX:
        return None
    return value
