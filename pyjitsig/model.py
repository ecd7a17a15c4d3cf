"""
Canonical member signatures and parse errors.
All finished signatures are frozen dataclasses.
"""

import json
from dataclasses import dataclass, field
from typing import Optional

from .modifiers import MODIFIER_KEYWORDS, MODIFIER_ORDER
from .types import CONSTRUCTOR_MARKER, STATIC_INIT_MARKER, VOID, package_name, simple_class_name

UNKNOWN_MEMBER = "?"


class SignatureParseError(Exception):
    """A line that does not match the grammar of its format."""

    def __init__(self, text: str, message: Optional[str] = None):
        self.text = text
        super().__init__(message or f"Could not parse signature: '{text}'")


class MalformedLogSignature(SignatureParseError):
    """A log compilation signature without owner, member, params and return."""

    def __init__(self, text: str, message: Optional[str] = None):
        super().__init__(text, message or f"Could not split log signature: '{text}'")


class MalformedAssemblySignature(SignatureParseError):
    """An assembly header line that is not of the form 'name' '(params)ret' in 'owner'."""

    def __init__(self, text: str, message: Optional[str] = None):
        super().__init__(text, message or f"Could not parse assembly signature: '{text}'")


class UnidentifiedMember(SignatureParseError):
    """A signature that was finalized without a member name."""

    def __init__(self, text: str, signature: "CanonicalSignature"):
        self.signature = signature
        super().__init__(text, f"No member name recovered from: '{text}'")


@dataclass
class SignatureParts:
    """An unfinished signature, filled in by a format parser."""
    owning_type: Optional[str] = None
    member_name: Optional[str] = None
    return_type: Optional[str] = None
    param_types: list[str] = field(default_factory=list)
    modifiers: list[str] = field(default_factory=list)
    modifier_bits: int = 0

    def add_modifier(self, keyword: str):
        flag = MODIFIER_KEYWORDS[keyword]
        if not self.modifier_bits & flag:
            self.modifier_bits |= flag
            self.modifiers.append(keyword)


@dataclass(frozen=True)
class CanonicalSignature:
    """A class member identity that compares equal across log, bytecode and assembly sources.

    Modifiers are carried but excluded from equality: two tools may disagree
    on whether a flag such as 'synchronized' is printed.
    """
    owning_type: str
    member_name: Optional[str]
    return_type: Optional[str]
    param_types: tuple[str, ...] = ()
    modifiers: tuple[str, ...] = field(default=(), compare=False)
    modifier_bits: int = field(default=0, compare=False)

    @property
    def identified(self) -> bool:
        return self.member_name is not None

    @property
    def is_static_initializer(self) -> bool:
        return self.member_name == STATIC_INIT_MARKER

    @property
    def is_constructor(self) -> bool:
        return (self.member_name is not None
                and self.member_name == simple_class_name(self.owning_type)
                and self.return_type == VOID)

    @property
    def package_name(self) -> str:
        return package_name(self.owning_type)

    def has_modifier(self, keyword: str) -> bool:
        flag = MODIFIER_KEYWORDS.get(keyword)
        return flag is not None and bool(self.modifier_bits & flag)

    def to_single_line(self) -> str:
        """Render as owner.member(param,param); an unidentified member shows as '?'."""
        member = self.member_name if self.member_name is not None else UNKNOWN_MEMBER
        return f"{self.owning_type}.{member}({','.join(self.param_types)})"

    def to_dict(self) -> dict:
        return {
            "owning_type": self.owning_type,
            "modifiers": list(self.modifiers),
            "modifier_bits": self.modifier_bits,
            "return_type": self.return_type,
            "member_name": self.member_name,
            "param_types": list(self.param_types),
            "identified": self.identified,
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def __str__(self) -> str:
        parts = [m for m in MODIFIER_ORDER if m in self.modifiers]
        if self.return_type and not self.is_constructor:
            parts.append(self.return_type)
        parts.append(self.to_single_line())
        return " ".join(parts)

    @staticmethod
    def is_constructor_name(member_name: Optional[str], owning_type: Optional[str]) -> bool:
        if member_name is None:
            return False
        if member_name == CONSTRUCTOR_MARKER:
            return True
        if owning_type is None:
            return False
        return member_name == owning_type or member_name == simple_class_name(owning_type)
