"""
Mapping resolution and content mapping.

A mapping specification is either:
    - a single function, applied to every fragment, or
    - a table of rules keyed by element name.

Table keys are bare local names ("person"), prefixed names ("p:person")
or the wildcard "*". Rule values are either a replacement tag name or a
function. Functions receive a Payload and return the output string.

Prefixed keys are matched by namespace URI, not by prefix text:
the prefix in a key refers to a mapping-side namespace declared in
SerializeOptions.namespaces, and an element matches it when its own
(document-side) namespace resolves to the same URI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Sequence, Union

from jml.model import Fragment, FragmentType, Namespace, SerializeOptions
from jml.namespaces import (
    find_default_uri,
    find_namespace_by_prefix,
    find_namespace_by_uri,
    split_name,
)

logger = logging.getLogger(__name__)

WILDCARD = "*"


@dataclass(frozen=True)
class Payload:
    """
    What a mapping function is called with.

    Properties:
        content:
            For elements, the already serialized content of all
            children. For a text fragment, its text.

        attributes:
            Merged attributes (inherited from ancestors, overridden by
            the element's own). None for text fragments.

        name:
            Raw element name. None for text fragments.
    """

    content: str
    attributes: Optional[Dict[str, str]] = None
    name: Optional[str] = None


MappingFunction = Callable[[Payload], str]
Rule = Union[str, MappingFunction]
MappingTable = Mapping[str, Rule]
Mappings = Union[MappingFunction, MappingTable]


@dataclass(frozen=True)
class MappingSpec:
    """
    A mapping specification with its variant resolved.

    Exactly one of function or table is set.
    """

    function: Optional[MappingFunction] = None
    table: Optional[MappingTable] = None

    @classmethod
    def of(cls, mappings: Mappings) -> MappingSpec:
        if callable(mappings):
            return cls(function=mappings)
        return cls(table=mappings)

    @property
    def is_function(self) -> bool:
        return self.function is not None


def create_payload(fragment: Fragment, content: str, attributes: Dict[str, str]) -> Payload:
    if fragment.type == FragmentType.TEXT:
        return Payload(content=fragment.text)
    return Payload(content=content, attributes=attributes, name=fragment.name)


def _lookup_key(
    name: str,
    namespaces: Sequence[Namespace],
    options: SerializeOptions,
) -> Optional[str]:
    """
    Table key for an element seen under the given namespaces.

    Returns None when the element's namespace has no mapping-side
    declaration; such elements can only match the wildcard.
    """
    default_uri = find_default_uri(namespaces)
    qname = split_name(name)
    if default_uri is None and not qname.prefix:
        return name

    if qname.prefix:
        bound = find_namespace_by_prefix(namespaces, qname.prefix)
        active_uri = bound.uri if bound is not None else None
    else:
        active_uri = default_uri
    if active_uri is None:
        return None

    mapped = find_namespace_by_uri(options.namespaces, active_uri)
    if mapped is None:
        return None
    return f"{mapped.prefix}:{qname.local}"


def find_mapping(
    table: MappingTable,
    name: Optional[str],
    namespaces: Sequence[Namespace],
    options: SerializeOptions,
) -> Optional[Rule]:
    """
    Find the rule that applies to an element.

    Args:
        table: Mapping table
        name: Raw element name (None for text fragments)
        namespaces: Document-side namespaces visible at the element
        options: Serialize options holding the mapping-side namespaces

    Returns:
        The matching rule, the wildcard rule, or None
    """
    rule = None
    if name is not None:
        key = _lookup_key(name, namespaces, options) if namespaces else name
        if key is not None:
            rule = table.get(key)
    if rule is None:
        return table.get(WILDCARD)
    return rule


def map_content(
    fragment: Fragment,
    attributes: Dict[str, str],
    namespaces: Sequence[Namespace],
    content: str,
    spec: MappingSpec,
    options: SerializeOptions,
) -> Optional[str]:
    """
    Produce the output for one fragment.

    Returns None when the fragment has no rule; the caller drops it
    together with everything its children produced.
    """
    payload = create_payload(fragment, content, attributes)
    if spec.is_function:
        return spec.function(payload)

    name = getattr(fragment, "name", None)
    rule = find_mapping(spec.table, name, namespaces, options)
    if rule is None:
        logger.debug("No mapping for %r, dropping it", name)
        return None
    if options.skip_empty and content == "":
        return content
    if callable(rule):
        return rule(payload)
    return f"<{rule}>{content}</{rule}>"
