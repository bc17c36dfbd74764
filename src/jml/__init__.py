"""
JML Serializer Package

Serializes JML trees (the JSON shape xml-js produces for parsed XML)
into strings, driven by per-element mapping rules.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - XML text parsing
    - Output formats beyond the tags the caller asks for
    - Streaming or incremental output

Unmapped content is dropped.
Namespaced elements are matched by URI, never by prefix text.
"""

from jml.fragments import wrap_element_fragments
from jml.mapping import Payload
from jml.model import (
    ElementFragment,
    FragmentError,
    FragmentType,
    JmlObject,
    Namespace,
    SerializeOptions,
    TextFragment,
)
from jml.serializer import OptionsError, serialize

__version__ = "0.1.0"

__all__ = [
    "ElementFragment",
    "FragmentError",
    "FragmentType",
    "JmlObject",
    "Namespace",
    "OptionsError",
    "Payload",
    "SerializeOptions",
    "TextFragment",
    "serialize",
    "wrap_element_fragments",
]
