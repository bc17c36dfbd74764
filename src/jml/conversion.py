"""
Conversion helpers for JML objects and serialize options.

Provides JSON/YAML round-trip via the plain dict shape xml-js uses:
    {"type": "element", "name": ..., "attributes": {...}, "elements": [...]}
    {"type": "text", "text": ...}

Empty attributes and elements are left out on the way back, as xml-js does.
Mapping tables can be loaded from YAML as long as every rule is a tag name.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping

import yaml

from jml.model import (
    ElementFragment,
    Fragment,
    FragmentError,
    FragmentType,
    JmlObject,
    Namespace,
    SerializeOptions,
    TextFragment,
)


def _node_to_dict(fragment: Fragment) -> Dict[str, Any]:
    """Dict for a single fragment; an element's children are filled in by the caller."""
    if isinstance(fragment, TextFragment):
        return {"type": FragmentType.TEXT.value, "text": fragment.text}
    if isinstance(fragment, ElementFragment):
        d: Dict[str, Any] = {"type": FragmentType.ELEMENT.value, "name": fragment.name}
        if fragment.attributes:
            d["attributes"] = dict(fragment.attributes)
        if fragment.elements:
            d["elements"] = []
        return d
    raise TypeError(f"Unsupported fragment type: {type(fragment)}")


def fragment_to_dict(fragment: Fragment) -> Dict[str, Any]:
    # explicit stack, so deep trees do not hit the recursion limit
    root = _node_to_dict(fragment)
    stack = [(fragment, root)]
    while stack:
        current, d = stack.pop()
        for child in getattr(current, "elements", []):
            child_dict = _node_to_dict(child)
            d["elements"].append(child_dict)
            stack.append((child, child_dict))
    return root


def _node_from_dict(d: Mapping[str, Any]) -> Fragment:
    """Fragment for a single dict; an element's children are filled in by the caller."""
    if not isinstance(d, Mapping):
        raise FragmentError(f"Fragment must be a mapping, got {type(d).__name__}")
    t = d.get("type")
    if t == FragmentType.TEXT.value:
        if "text" not in d:
            raise FragmentError(f"Text fragment without text: {d!r}")
        return TextFragment(text=str(d["text"]))
    if t == FragmentType.ELEMENT.value:
        if not d.get("name"):
            raise FragmentError(f"Element fragment without name: {d!r}")
        return ElementFragment(
            name=d["name"],
            attributes={k: str(v) for k, v in (d.get("attributes") or {}).items()},
        )
    raise FragmentError(f"Unsupported fragment type: {t!r}")


def fragment_from_dict(d: Mapping[str, Any]) -> Fragment:
    root = _node_from_dict(d)
    stack = [(d, root)]
    while stack:
        current, fragment = stack.pop()
        if not isinstance(fragment, ElementFragment):
            continue
        for child in current.get("elements") or []:
            child_fragment = _node_from_dict(child)
            fragment.elements.append(child_fragment)
            stack.append((child, child_fragment))
    return root


def jml_to_dict(jml_object: JmlObject) -> Dict[str, Any]:
    return {"elements": [fragment_to_dict(f) for f in jml_object.elements]}


def jml_from_dict(d: Mapping[str, Any]) -> JmlObject:
    # xml-js puts the <?xml ...?> declaration next to "elements"; it is not content
    return JmlObject(elements=[fragment_from_dict(f) for f in d.get("elements") or []])


def jml_to_json(jml_object: JmlObject) -> str:
    return json.dumps(jml_to_dict(jml_object))


def jml_from_json(s: str) -> JmlObject:
    d = json.loads(s)
    return jml_from_dict(d)


def jml_to_yaml(jml_object: JmlObject) -> str:
    return yaml.safe_dump(jml_to_dict(jml_object), sort_keys=False)


def jml_from_yaml(s: str) -> JmlObject:
    d = yaml.safe_load(s)
    return jml_from_dict(d or {})


def namespace_to_dict(ns: Namespace) -> Dict[str, Any]:
    return {"prefix": ns.prefix, "uri": ns.uri}


def namespace_from_dict(d: Mapping[str, Any]) -> Namespace:
    return Namespace(prefix=d.get("prefix"), uri=d["uri"])


def options_to_dict(options: SerializeOptions) -> Dict[str, Any]:
    return {
        "namespaces": [namespace_to_dict(ns) for ns in options.namespaces],
        "skipEmpty": options.skip_empty,
    }


def options_from_dict(d: Mapping[str, Any]) -> SerializeOptions:
    """Build options from a dict; both "skipEmpty" and "skip_empty" are accepted."""
    skip_empty = d.get("skipEmpty", d.get("skip_empty", False))
    return SerializeOptions(
        namespaces=[namespace_from_dict(ns) for ns in d.get("namespaces") or []],
        skip_empty=bool(skip_empty),
    )


def load_options_yaml(s: str) -> SerializeOptions:
    """
    Load serialize options from YAML, e.g.:

        namespaces:
          - prefix: t
            uri: http://www.tei-c.org/ns/1.0
        skipEmpty: true
    """
    d = yaml.safe_load(s)
    return options_from_dict(d or {})


def mapping_table_from_yaml(s: str) -> Dict[str, str]:
    """
    Load a mapping table whose rules are all tag names.

    Raises:
        ValueError: If the document is not a mapping or a rule is not a string
    """
    d = yaml.safe_load(s)
    if d is None:
        return {}
    if not isinstance(d, dict):
        raise ValueError(f"Mapping table must be a YAML mapping, got {type(d).__name__}")
    table: Dict[str, str] = {}
    for key, rule in d.items():
        if not isinstance(rule, str):
            raise ValueError(f"Rule for {key!r} must be a tag name, got {rule!r}")
        table[str(key)] = rule
    return table


__all__: List[str] = [
    "fragment_to_dict",
    "fragment_from_dict",
    "jml_to_dict",
    "jml_from_dict",
    "jml_to_json",
    "jml_from_json",
    "jml_to_yaml",
    "jml_from_yaml",
    "namespace_to_dict",
    "namespace_from_dict",
    "options_to_dict",
    "options_from_dict",
    "load_options_yaml",
    "mapping_table_from_yaml",
]
