"""
Namespace helpers for JML trees.

Reads namespace declarations out of attribute maps and answers the
questions the mapping resolver asks of them: which URI is the default,
which URI a prefix is bound to, which prefix a URI is bound to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from jml.model import Namespace


XMLNS = "xmlns"


@dataclass(frozen=True)
class QualifiedName:
    """An element name split into prefix and local part."""
    prefix: Optional[str]
    local: str


def split_name(name: str) -> QualifiedName:
    """
    Split "prefix:local" at the first colon.

    Names without a colon have no prefix:
        split_name("person")     -> QualifiedName(None, "person")
        split_name("tei:person") -> QualifiedName("tei", "person")
    """
    prefix, sep, local = name.partition(":")
    if not sep:
        return QualifiedName(prefix=None, local=name)
    return QualifiedName(prefix=prefix, local=local)


def extract_namespaces(attributes: Dict[str, str]) -> List[Namespace]:
    """
    Collect the namespace declarations in an attribute map.

    "xmlns" declares the default namespace, "xmlns:<prefix>" a prefixed
    one. Everything else is an ordinary attribute and is ignored.
    Declarations come back in attribute order.
    """
    namespaces: List[Namespace] = []
    for key, value in attributes.items():
        if key == XMLNS:
            namespaces.append(Namespace(prefix=None, uri=value))
        elif key.startswith(XMLNS + ":"):
            namespaces.append(Namespace(prefix=key[len(XMLNS) + 1:], uri=value))
    return namespaces


def find_default_uri(namespaces: Sequence[Namespace]) -> Optional[str]:
    """URI of the first prefix-less declaration, if any."""
    for namespace in namespaces:
        if namespace.prefix is None:
            return namespace.uri
    return None


def find_namespace_by_prefix(namespaces: Sequence[Namespace], prefix: str) -> Optional[Namespace]:
    for namespace in namespaces:
        if namespace.prefix == prefix:
            return namespace
    return None


def find_namespace_by_uri(namespaces: Sequence[Namespace], uri: str) -> Optional[Namespace]:
    for namespace in namespaces:
        if namespace.uri == uri:
            return namespace
    return None
