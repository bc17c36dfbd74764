"""
Wrapping of loose element fragments into serializable JML objects.

The serializer only looks at the first fragment of a JML object, so a
list of sibling elements has to be split into one JML object each.
"""

from typing import Any, List, Mapping, Sequence, Union

from jml.conversion import fragment_from_dict
from jml.model import ElementFragment, FragmentError, JmlObject

FragmentLike = Union[ElementFragment, Mapping[str, Any]]


def _as_element(fragment: FragmentLike) -> ElementFragment:
    if isinstance(fragment, Mapping):
        fragment = fragment_from_dict(fragment)
    if not isinstance(fragment, ElementFragment):
        raise FragmentError(f"Not an element fragment: {fragment!r}")
    return fragment


def wrap_element_fragments(
    fragments: Union[FragmentLike, Sequence[FragmentLike], None] = None,
) -> List[JmlObject]:
    """
    Wrap one element fragment, or a list of them, into JML objects.

    Args:
        fragments: An ElementFragment, an xml-js style element dict,
            or a list or tuple of either

    Returns:
        One JmlObject per fragment; empty list when called without fragments

    Raises:
        FragmentError: If any of the fragments is not an element. Nothing is
            returned in that case, not even the valid ones.
    """
    if fragments is None:
        return []
    if not isinstance(fragments, (list, tuple)):
        fragments = [fragments]
    elements = [_as_element(f) for f in fragments]
    return [JmlObject(elements=[element]) for element in elements]
