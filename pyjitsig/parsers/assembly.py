"""
Parser for the method header of a disassembled nmethod.

    # {method} {0x00007f3c1c4011b8} 'hashCode' '()I' in 'java/lang/String'
"""

import logging
import re

from ..finalizer import finalize
from ..model import CanonicalSignature, MalformedAssemblySignature, SignatureParts
from .common import DescriptorError, set_params_and_return

logger = logging.getLogger(__name__)

ASSEMBLY_SIGNATURE_PATTERN = re.compile(r"^(.*)\s'(.*)'\s'(\(.*\))(.*)'\sin\s'(.*)'")


class AssemblyHeaderParser:
    """Parses '{method}' header lines from hsdis output."""

    def __init__(self, strict: bool = False):
        self.strict = strict

    def parse(self, text: str) -> CanonicalSignature:
        line = text.replace("&apos;", "'")

        match = ASSEMBLY_SIGNATURE_PATTERN.search(line)
        if not match:
            raise MalformedAssemblySignature(text)

        logger.debug("Assembly signature parts: %s", match.groups())

        member = match.group(2)
        params = match.group(3)[1:-1]
        return_type = match.group(4)
        owner = match.group(5).replace("/", ".")

        parts = SignatureParts(owning_type=owner, member_name=member)

        try:
            set_params_and_return(parts, params, return_type)
        except DescriptorError as e:
            raise MalformedAssemblySignature(text, str(e)) from e

        return finalize(parts, text, strict=self.strict)
