"""
Finalization of parsed signatures.

Every format parser hands its unfinished SignatureParts to ``finalize``, which
applies the rules common to all formats: constructor renaming, void returns for
constructors and static initializers, and removal of synthetic parameters.
"""

import logging
import re
from typing import Optional, Union

from .model import CanonicalSignature, SignatureParts, UnidentifiedMember
from .modifiers import modifier_names
from .types import STATIC_INIT_MARKER, VOID, simple_class_name

logger = logging.getLogger(__name__)

# javac passes an instance of an anonymous Outer$1 to private constructors
# it calls through a synthetic accessor
SYNTHETIC_BRIDGE_PARAM = re.compile(r"\$\d+$")


def looks_like_synthetic_bridge_param(param_type: str) -> bool:
    return SYNTHETIC_BRIDGE_PARAM.search(param_type) is not None


def finalize(parts: Union[SignatureParts, CanonicalSignature],
             source_text: Optional[str] = None,
             strict: bool = False) -> CanonicalSignature:
    """Finish a parsed signature. Finalizing a finished signature changes nothing."""
    owner = parts.owning_type or ""
    member = parts.member_name
    return_type = parts.return_type
    params = list(parts.param_types)

    if CanonicalSignature.is_constructor_name(member, owner):
        member = simple_class_name(owner)
        return_type = VOID
    elif member == STATIC_INIT_MARKER:
        return_type = VOID
        params = []

    kept = []
    for param in params:
        if looks_like_synthetic_bridge_param(param):
            logger.debug("Synthetic bridge constructor arg: %s", param)
        else:
            kept.append(param)

    sig = CanonicalSignature(
        owning_type=owner,
        member_name=member,
        return_type=return_type,
        param_types=tuple(kept),
        modifiers=modifier_names(parts.modifier_bits),
        modifier_bits=parts.modifier_bits,
    )

    if member is None:
        text = source_text if source_text is not None else owner
        if strict:
            raise UnidentifiedMember(text, sig)
        logger.warning("No member name recovered from signature: '%s'", text)

    return sig


def from_parts(owning_type: str, member_name: Optional[str], return_type: Optional[str],
               param_types, modifiers=(), strict: bool = False) -> CanonicalSignature:
    """Build a signature from parts a caller already has split out."""
    parts = SignatureParts(
        owning_type=owning_type,
        member_name=member_name,
        return_type=return_type,
        param_types=list(param_types),
    )
    for keyword in modifiers:
        parts.add_modifier(keyword)
    return finalize(parts, f"{owning_type},{member_name},{return_type}", strict=strict)
