"""
JVM generic signature reader.

Reads the type-parameter section of a class or method Signature attribute
(JVMS 4.7.9.1) and erases each parameter to its bound, giving the same
name -> bound mapping that a javap header like ``class Box<T extends Number>``
produces.
"""

import re
from typing import Optional

from .types import OBJECT, PRIMITIVE_DESCRIPTORS

# Identifiers end at any of the signature punctuation characters
IDENTIFIER = re.compile(r"[^/;.<>:]*")


class SignatureParser:
    """Parses the type parameters and field types of a JVM generic signature."""

    def __init__(self, signature: str):
        self.sig = signature
        self.pos = 0

    def _current(self) -> str:
        return self.sig[self.pos] if self.pos < len(self.sig) else ""

    def _consume(self, expected: Optional[str] = None) -> str:
        ch = self._current()
        if expected is not None and ch != expected:
            raise ValueError(f"Expected '{expected}' but found '{ch or 'end'}' at {self.pos} in '{self.sig}'")
        self.pos += 1
        return ch

    def _identifier(self) -> str:
        match = IDENTIFIER.match(self.sig, self.pos)
        self.pos = match.end()
        return match.group()

    def parse_type_parameters(self) -> dict[str, Optional[str]]:
        """Parse optional type parameters (<T:..>) into name -> erased bound."""
        if self._current() != "<":
            return {}
        self._consume("<")
        params = {}
        while self._current() != ">":
            if not self._current():
                raise ValueError(f"Unterminated type parameters in '{self.sig}'")
            name, bound = self._parse_type_parameter()
            params[name] = bound
        self._consume(">")
        return params

    def _parse_type_parameter(self) -> tuple[str, Optional[str]]:
        name = self._identifier()
        self._consume(":")
        bounds = []
        # Class bound may be empty when only interface bounds follow
        if self._current() not in ":>":
            bounds.append(self._parse_field_type())
        while self._current() == ":":
            self._consume(":")
            bounds.append(self._parse_field_type())
        # Erasure is the leftmost bound; an Object bound means unconstrained
        bound = bounds[0] if bounds else None
        if bound == OBJECT:
            bound = None
        return name, bound

    def _parse_type(self) -> str:
        ch = self._current()
        if ch and ch in PRIMITIVE_DESCRIPTORS:
            self._consume()
            return PRIMITIVE_DESCRIPTORS[ch]
        return self._parse_field_type()

    def _parse_field_type(self) -> str:
        """Parse a class, array or type variable signature to an erased name."""
        ch = self._current()
        if ch == "L":
            return self._parse_class_type()
        elif ch == "[":
            self._consume()
            return self._parse_type() + "[]"
        elif ch == "T":
            self._consume()
            name = self._identifier()
            self._consume(";")
            return name
        else:
            raise ValueError(f"Unexpected char '{ch}' at pos {self.pos} in field type signature")

    def _parse_class_type(self) -> str:
        self._consume("L")
        parts = [self._identifier()]
        while self._current() == "/":
            self._consume()
            parts.append(self._identifier())
        name = ".".join(parts)
        self._skip_type_arguments()

        # Inner classes
        while self._current() == ".":
            self._consume()
            name = f"{name}${self._identifier()}"
            self._skip_type_arguments()

        self._consume(";")
        return name

    def _skip_type_arguments(self):
        """Type arguments do not survive erasure."""
        if self._current() != "<":
            return
        self._consume()
        while self._current() != ">":
            ch = self._current()
            if not ch:
                raise ValueError(f"Unterminated type arguments in '{self.sig}'")
            if ch == "*":
                self._consume()
                continue
            if ch in "+-":
                self._consume()
            self._parse_field_type()
        self._consume()


def parse_type_parameters(signature: str) -> dict[str, Optional[str]]:
    """Return the erased type-parameter bindings declared by a signature."""
    return SignatureParser(signature).parse_type_parameters()
