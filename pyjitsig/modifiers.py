"""
Method modifier table.

Bit values are the JVM access flags; keyword order is the order javap prints
them in, which is also the order the bytecode header grammar tests for them.
"""

from enum import IntFlag
from typing import Iterable


class Modifier(IntFlag):
    PUBLIC = 0x0001
    PRIVATE = 0x0002
    PROTECTED = 0x0004
    STATIC = 0x0008
    FINAL = 0x0010
    SYNCHRONIZED = 0x0020
    NATIVE = 0x0100
    ABSTRACT = 0x0400
    STRICT = 0x0800


# keyword -> flag, in canonical order
MODIFIER_KEYWORDS: dict[str, Modifier] = {
    "public": Modifier.PUBLIC,
    "protected": Modifier.PROTECTED,
    "private": Modifier.PRIVATE,
    "abstract": Modifier.ABSTRACT,
    "static": Modifier.STATIC,
    "final": Modifier.FINAL,
    "synchronized": Modifier.SYNCHRONIZED,
    "native": Modifier.NATIVE,
    "strictfp": Modifier.STRICT,
}

MODIFIER_ORDER: tuple[str, ...] = tuple(MODIFIER_KEYWORDS)


def modifier_bits(names: Iterable[str]) -> int:
    """Convert modifier keywords to a bitmask. Unknown keywords are ignored."""
    bits = 0
    for name in names:
        flag = MODIFIER_KEYWORDS.get(name)
        if flag is not None:
            bits |= flag
    return bits


def modifier_names(bits: int) -> tuple[str, ...]:
    """Convert a bitmask to keywords in canonical order."""
    return tuple(name for name, flag in MODIFIER_KEYWORDS.items() if bits & flag)
