"""
Core JML Model Objects

Defines the data structures of a JML (JSON markup language) tree, the
non-compact shape xml-js produces for a parsed XML document:

    {"elements": [
        {"type": "element", "name": "person",
         "attributes": {"born": "yes"},
         "elements": [{"type": "text", "text": "Ada"}]}
    ]}

These are pure data classes representing:
    - Fragments (element and text nodes)
    - JML objects (root containers)
    - Namespace declarations
    - Serialization options

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about mapping rules or output formats
        - Are immutable once constructed
        - Represent structure, not behavior
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class FragmentError(ValueError):
    """Raised when a fragment descriptor does not have a valid shape."""
    pass


class FragmentType(Enum):
    """Kinds of fragment a JML tree is built from."""
    ELEMENT = "element"
    TEXT = "text"


@dataclass(frozen=True)
class TextFragment:
    """
    A run of character data.

    Properties:
        text: The literal text, whitespace included
    """

    text: str
    type: FragmentType = field(default=FragmentType.TEXT, init=False)


@dataclass(frozen=True)
class ElementFragment:
    """
    Represents a single element of a JML tree.

    Properties:
        name:
            Element name as written in the document, possibly
            namespace-qualified (e.g. "person" or "tei:person")

        attributes:
            Attribute map. Namespace declarations live here too,
            as "xmlns" / "xmlns:<prefix>" keys.

        elements:
            Ordered child fragments

    IMPORTANT:
        The type tag is fixed to ELEMENT and cannot be passed in.
        Only element fragments carry attributes and children.
    """

    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    elements: List["Fragment"] = field(default_factory=list)
    type: FragmentType = field(default=FragmentType.ELEMENT, init=False)


Fragment = Union[ElementFragment, TextFragment]


@dataclass
class JmlObject:
    """
    Root container handed to the serializer.

    Only the first fragment is ever serialized. Wrapping several
    fragments is done with one JmlObject per fragment
    (see jml.fragments.wrap_element_fragments).
    """

    elements: List[Fragment] = field(default_factory=list)

    @property
    def root(self) -> Optional[Fragment]:
        """First fragment, or None for an empty container."""
        if not self.elements:
            return None
        return self.elements[0]


@dataclass(frozen=True)
class Namespace:
    """
    A namespace declaration.

    Used on two sides:
        - Document side: declarations found in the tree's own
          attributes. A None prefix is the default namespace.
        - Mapping side: declarations passed in SerializeOptions,
          naming the prefix used in mapping table keys. These MUST
          carry a prefix.

    Properties:
        prefix: Namespace prefix, or None for a default namespace
        uri: Namespace URI (what declarations are matched on)
    """

    prefix: Optional[str]
    uri: str


@dataclass
class SerializeOptions:
    """
    Options for a serialize call.

    Properties:
        namespaces:
            Mapping-side namespace declarations. A mapping key
            "p:person" matches any document element whose namespace
            URI is bound to "p" here, whatever prefix the document uses.

        skip_empty:
            When True, mapped elements with no content are emitted as
            the empty string instead of an empty tag pair.
    """

    namespaces: List[Namespace] = field(default_factory=list)
    skip_empty: bool = False
