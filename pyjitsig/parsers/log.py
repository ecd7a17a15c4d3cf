"""
Parser for HotSpot LogCompilation method signatures.

    java/lang/String indexOf (Ljava/lang/String;I)I
"""

import re

from ..finalizer import finalize
from ..model import CanonicalSignature, MalformedLogSignature, SignatureParts
from .common import DescriptorError, set_params_and_return


LOG_SIGNATURE_PATTERN = re.compile(r"^([\w.$/]+)(?:\s+|#)([\w<>$]+)\s*(\(.*\))(.*)$")

BYTECODE_COMMENT_PATTERN = re.compile(r"^\s*(?://\s*)?(?:(?:Interface)?Method\s+)?(\S+)\s*$")


def unescape_entities(text: str) -> str:
    return text.replace("&lt;", "<").replace("&gt;", ">")


def split_log_signature(text: str) -> tuple[str, str, str, str]:
    """Split into (owner, member, param descriptors, return descriptor).

    The parameter block is returned without its parentheses.
    """
    match = LOG_SIGNATURE_PATTERN.match(unescape_entities(text).strip())
    if not match:
        raise MalformedLogSignature(text)
    owner, member, params, return_type = match.groups()
    return owner, member, params[1:-1], return_type.strip()


def bytecode_comment_to_log_signature(comment: str) -> str:
    """Rewrite a javap constant pool comment as a log compilation signature.

    ``// Method java/lang/String.length:()I`` -> ``java/lang/String length ()I``
    """
    match = BYTECODE_COMMENT_PATTERN.match(comment)
    if not match:
        raise MalformedLogSignature(comment, f"Not a method reference comment: '{comment}'")

    ref = match.group(1).replace('"', "")
    owner_and_member, sep, descriptor = ref.rpartition(":")
    if not sep or not descriptor.startswith("("):
        raise MalformedLogSignature(comment, f"No method descriptor in comment: '{comment}'")

    owner, dot, member = owner_and_member.rpartition(".")
    if not dot or not owner:
        raise MalformedLogSignature(comment, f"No owning class in comment: '{comment}'")

    return f"{owner} {member} {descriptor}"


class LogCompilationParser:
    """Parses LogCompilation 'method' attribute signatures."""

    def __init__(self, strict: bool = False):
        self.strict = strict

    def parse(self, text: str) -> CanonicalSignature:
        owner, member, params, return_type = split_log_signature(text)

        parts = SignatureParts(owning_type=owner.replace("/", "."), member_name=member)

        try:
            set_params_and_return(parts, params, return_type)
        except DescriptorError as e:
            raise MalformedLogSignature(text, str(e)) from e

        return finalize(parts, text, strict=self.strict)

    def parse_bytecode_comment(self, comment: str) -> CanonicalSignature:
        """Parse a method reference from a javap instruction comment."""
        return self.parse(bytecode_comment_to_log_signature(comment))
