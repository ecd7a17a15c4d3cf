"""
Descriptor handling shared by the log compilation and assembly formats.
"""

from ..descriptors import DescriptorError, split_descriptors
from ..model import SignatureParts
from ..types import VOID, expand_type_name


def set_params_and_return(parts: SignatureParts, param_block: str, return_block: str):
    """Expand a descriptor parameter block and return slot into ``parts``.

    A return slot that does not hold exactly one descriptor is taken as void.
    Raises DescriptorError if either block is not a descriptor sequence.
    """
    params = split_descriptors(param_block)
    returns = split_descriptors(return_block)

    if len(returns) == 1:
        parts.return_type = expand_type_name(returns[0])
    else:
        parts.return_type = VOID

    parts.param_types = [expand_type_name(p) for p in params]


__all__ = ["DescriptorError", "set_params_and_return"]
