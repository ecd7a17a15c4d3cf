"""
Generic type parameter resolution.

A type variable in a bytecode header is looked up first in the method's own
type-parameter declaration, then in each enclosing class from the innermost
outward. A type that still carries type arguments after that is erased.
"""

import re
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional

from .model import SignatureParseError
from .signature import parse_type_parameters
from .tokenizer import matching_angle, split_parameters
from .types import OBJECT


GenericsBinding = Mapping[str, Optional[str]]

CLASS_HEADER_PATTERN = re.compile(r"\b(?:class|interface|enum)\s+([\w.$]+)")


@dataclass(frozen=True)
class ClassContext:
    """A class as seen from a member signature: its generics and enclosing class."""
    name: str
    generics: Optional[GenericsBinding] = field(default=None, hash=False)
    parent: Optional["ClassContext"] = None

    @classmethod
    def from_class_header(cls, line: str, parent: Optional["ClassContext"] = None) -> "ClassContext":
        """Build a context from a javap class header.

        ``public class a.b.Box<T extends java.lang.Number> extends java.lang.Object``
        gives name ``a.b.Box`` and generics ``{T: java.lang.Number}``.
        """
        match = CLASS_HEADER_PATTERN.search(line)
        if not match:
            raise SignatureParseError(line, "Not a class header")

        name = match.group(1)
        generics = None
        open_pos = match.end()
        if line[open_pos:open_pos + 1] == "<":
            close_pos = matching_angle(line, open_pos)
            if close_pos == -1:
                raise SignatureParseError(line, "Unterminated type parameters in class header")
            generics = parse_generics_declaration(line[open_pos + 1:close_pos])

        return cls(name=name, generics=generics, parent=parent)

    @classmethod
    def from_signature(cls, name: str, signature: Optional[str],
                       parent: Optional["ClassContext"] = None) -> "ClassContext":
        """Build a context from a classfile Signature attribute, if the class has one."""
        generics = None
        if signature:
            try:
                generics = parse_type_parameters(signature)
            except ValueError as e:
                raise SignatureParseError(signature, str(e)) from e
        return cls(name=name.replace("/", "."), generics=generics or None, parent=parent)


def chain(class_context) -> Iterator:
    """Yield a class context and its enclosing classes, innermost first."""
    current = class_context
    while current is not None:
        yield current
        current = getattr(current, "parent", None)


def parse_generics_declaration(fragment: str) -> dict[str, Optional[str]]:
    """Parse 'T extends Foo, U' into {'T': 'Foo', 'U': None}.

    The fragment may still carry its surrounding braces or angle brackets.
    Only the leftmost bound of an intersection ('T extends A & B') is kept,
    since that is the erasure.
    """
    fragment = fragment.strip()
    if fragment[:1] + fragment[-1:] in ("{}", "<>"):
        fragment = fragment[1:-1]

    result = {}
    for entry in split_parameters(fragment):
        entry = entry.replace("/", ".")
        if " extends " in entry:
            name, bound = entry.split(" extends ", 1)
            bound = erase_type_arguments(_first_bound(bound))
            result[name.strip()] = bound
        elif entry:
            result[entry] = None
    return result


def _first_bound(bound: str) -> str:
    depth = 0
    for i, ch in enumerate(bound):
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth = max(depth - 1, 0)
        elif ch == "&" and depth == 0:
            return bound[:i].strip()
    return bound.strip()


def erase_type_arguments(token: str) -> str:
    """Remove <...> spans: 'List<String>[]' -> 'List[]'."""
    start = token.find("<")
    while start != -1:
        end = matching_angle(token, start)
        if end == -1:
            return token[:start].strip()
        token = token[:start] + token[end + 1:]
        start = token.find("<")
    return token.strip()


def _lookup(token: str, method_binding: Optional[GenericsBinding], class_context):
    if method_binding is not None and token in method_binding:
        return True, method_binding[token]
    for ctx in chain(class_context):
        generics = getattr(ctx, "generics", None)
        if generics is not None and token in generics:
            return True, generics[token]
    return False, None


def resolve(token: str, method_binding: Optional[GenericsBinding] = None, class_context=None) -> str:
    """Resolve a type token against method and enclosing-class generics.

    A bound type variable becomes its bound (java.lang.Object when
    unconstrained). Array dimensions on a type variable are kept.
    """
    token = token.strip()

    base = token
    dims = 0
    while base.endswith("[]"):
        base = base[:-2].rstrip()
        dims += 1

    found, bound = _lookup(base, method_binding, class_context)
    if found:
        return (bound or OBJECT) + "[]" * dims

    if "<" in token:
        return erase_type_arguments(token)

    return token
