"""
JML serializer.

Walks a JML tree depth-first and turns it into a string according to a
mapping specification (see jml.mapping). Content without a mapping is
removed.

Example:
    mappings = {
        "p": "p",
        "head": "h2",
        "ref": lambda payload: f'<a href="{payload.attributes["target"]}">{payload.content}</a>',
        "*": "span",
    }
    serialize(jml_object, mappings)

To match an element that lives in a namespace, prefix its table key and
declare that prefix in SerializeOptions.namespaces. The prefix only has
to agree with the document by URI:

    options = SerializeOptions(namespaces=[Namespace("t", "http://www.tei-c.org/ns/1.0")])
    serialize(jml_object, {"t:p": "p"}, options)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from jml.conversion import jml_from_dict, options_from_dict
from jml.mapping import MappingSpec, Mappings, map_content
from jml.model import Fragment, JmlObject, SerializeOptions, TextFragment
from jml.namespaces import extract_namespaces

logger = logging.getLogger(__name__)


class OptionsError(ValueError):
    """Raised when serialize options are not valid."""
    pass


def validate_options(options: SerializeOptions) -> None:
    """
    Check the options before any traversal happens.

    Raises:
        OptionsError: If a mapping-side namespace has no prefix
    """
    for namespace in options.namespaces:
        if namespace.prefix is None:
            raise OptionsError(f"Options not valid: {namespace} doesn't have a prefix.")


@dataclass
class _Frame:
    """An element being serialized, with the output of the children done so far."""
    fragment: Fragment
    attributes: Dict[str, str]
    children: Iterator[Fragment]
    parts: List[str] = field(default_factory=list)

    @classmethod
    def enter(cls, fragment: Fragment, parent_attributes: Dict[str, str]) -> _Frame:
        attributes = {**parent_attributes, **getattr(fragment, "attributes", {})}
        return cls(fragment, attributes, iter(getattr(fragment, "elements", [])))


def transform(
    fragment: Fragment,
    parent_attributes: Dict[str, str],
    spec: MappingSpec,
    options: SerializeOptions,
) -> Optional[str]:
    """
    Serialize one fragment and everything below it.

    Attributes are inherited: the fragment sees its ancestors' attributes
    with its own layered on top, and passes that merged map on to its
    children. Namespace declarations are scoped the same way.

    The walk keeps its own stack of open elements, so tree depth is not
    bounded by the interpreter's recursion limit.

    Returns:
        The fragment's output, or None if it has no mapping
    """
    stack = [_Frame.enter(fragment, parent_attributes)]
    while True:
        frame = stack[-1]
        child = next(frame.children, None)
        if child is None:
            stack.pop()
            result = map_content(
                frame.fragment,
                frame.attributes,
                extract_namespaces(frame.attributes),
                "".join(frame.parts),
                spec,
                options,
            )
            if not stack:
                return result
            if result is not None:
                stack[-1].parts.append(result)
        elif isinstance(child, TextFragment):
            frame.parts.append(child.text)
        else:
            stack.append(_Frame.enter(child, frame.attributes))


def serialize(
    jml_object: Union[JmlObject, Mapping[str, Any], None],
    mappings: Optional[Mappings],
    options: Union[SerializeOptions, Mapping[str, Any], None] = None,
) -> str:
    """
    Serialize a JML object according to the provided mappings.

    Args:
        jml_object:
            The JML object, or a dict in the same shape
        mappings:
            Either a single function applied to every fragment or a table
            of rules keyed by element name ("*" is the wildcard)
        options:
            Mapping-side namespaces and the skip_empty flag, as
            SerializeOptions or a dict in the shape options_from_dict reads

    Returns:
        The serialized root fragment. The empty string when there is no
        root fragment, no mapping, or the root itself has no mapping.

    Raises:
        OptionsError: If options.namespaces holds a declaration without prefix
    """
    if options is None:
        options = SerializeOptions()
    elif not isinstance(options, SerializeOptions):
        options = options_from_dict(options)
    validate_options(options)
    if not jml_object or not mappings:
        return ""
    if not isinstance(jml_object, JmlObject):
        jml_object = jml_from_dict(jml_object)
    root = jml_object.root
    if root is None:
        return ""

    spec = MappingSpec.of(mappings)
    logger.debug("Serializing <%s> with %s mapping", getattr(root, "name", "#text"),
                 "function" if spec.is_function else "table")
    result = transform(root, {}, spec, options)
    return result if result is not None else ""
