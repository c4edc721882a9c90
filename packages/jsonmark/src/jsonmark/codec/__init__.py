# jsonmark/codec/__init__.py
from .transform import (
    MarkFormat,
    decode_value,
    encode_value,
    is_private_use_marker,
    starts_with_marker,
)
from .walk import OMIT, Replacer, Reviver, decode_tree, encode_tree
from .codec import JSONMark

__all__ = [
    "JSONMark",
    "MarkFormat",
    "encode_value",
    "decode_value",
    "is_private_use_marker",
    "starts_with_marker",
    "OMIT",
    "Replacer",
    "Reviver",
    "encode_tree",
    "decode_tree",
]
