"""
Parser for member header lines of a javap bytecode listing.

    public static <T extends java.lang.Comparable<T>> T max(java.util.List<T>) throws java.io.IOException;
    protected a.b.Widget(int, java.lang.String);
    static {};
"""

import re
from typing import Optional

from ..finalizer import finalize
from ..generics import GenericsBinding, parse_generics_declaration, resolve
from ..model import CanonicalSignature, SignatureParts
from ..modifiers import MODIFIER_ORDER
from ..tokenizer import matching_angle, split_parameters, strip_parameter_name
from ..types import STATIC_INIT_HEADER, STATIC_INIT_MARKER, VOID, normalize_type_name


def _build_signature_pattern() -> re.Pattern:
    builder = ["^ *"]
    for mod in MODIFIER_ORDER:
        builder.append(f"(?P<{mod}>{mod} )?")
    # interface default methods; not a recorded modifier
    builder.append("(?:default )?")
    builder.append(r"(?P<generics>\{.*\} )?")
    builder.append(r"(?P<return_type>.* )?")  # absent for constructors
    builder.append(r"(?P<name>[\w\-$<>.]+)")
    builder.append(r"(?P<params>\(.*\))")
    builder.append(r"(?P<rest>.*)")
    return re.compile("".join(builder))


BYTECODE_SIGNATURE_PATTERN = _build_signature_pattern()

MODIFIER_PREFIX_PATTERN = re.compile(
    r"^\s*(?:(?:" + "|".join(MODIFIER_ORDER + ("default",)) + r")\s+)*")


def isolate_generics_tag(text: str) -> str:
    """Brace the method's type-parameter list so its '<' and '>' are not read as part of a type.

    ``public <T extends Foo> T get()`` -> ``public {T extends Foo} T get()``.
    Only a list directly after the modifiers is rewritten; angle brackets in
    the return type or parameters are left for erasure.
    """
    prefix = MODIFIER_PREFIX_PATTERN.match(text)
    start = prefix.end()
    if text[start:start + 1] != "<":
        return text
    end = matching_angle(text, start)
    if end == -1:
        return text
    return text[:start] + "{" + text[start + 1:end] + "}" + text[end + 1:]


def is_static_initializer(text: str) -> bool:
    return text.lstrip().startswith(STATIC_INIT_HEADER)


class BytecodeHeaderParser:
    """Parses javap member headers, resolving generics against the enclosing classes."""

    def __init__(self, strict: bool = False):
        self.strict = strict

    def parse(self, text: str, class_name: str, class_context=None) -> CanonicalSignature:
        """Parse one header line of a member declared in ``class_name``.

        ``class_context`` is the ClassContext (or any object with ``generics``
        and ``parent``) of the declaring class.
        """
        owner = class_name.replace("/", ".")

        if is_static_initializer(text):
            parts = SignatureParts(owning_type=owner, member_name=STATIC_INIT_MARKER, return_type=VOID)
            return finalize(parts, text, strict=self.strict)

        to_parse = isolate_generics_tag(text)
        parts = SignatureParts(owning_type=owner)

        match = BYTECODE_SIGNATURE_PATTERN.match(to_parse)
        if match:
            for mod in MODIFIER_ORDER:
                if match.group(mod) is not None:
                    parts.add_modifier(mod)

            method_generics = None
            if match.group("generics") is not None:
                method_generics = parse_generics_declaration(match.group("generics"))

            if match.group("return_type") is not None:
                parts.return_type = self._resolve_type(
                    match.group("return_type"), class_context, method_generics)

            parts.member_name = match.group("name")

            inner = match.group("params")[1:-1]
            parts.param_types = [
                self._resolve_type(strip_parameter_name(param), class_context, method_generics)
                for param in split_parameters(inner)
            ]

        return finalize(parts, text, strict=self.strict)

    def _resolve_type(self, type_name: str, class_context,
                      method_generics: Optional[GenericsBinding]) -> str:
        return resolve(normalize_type_name(type_name), method_generics, class_context)
