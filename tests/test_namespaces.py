"""
Tests for namespace extraction and name splitting.
"""

from jml.model import Namespace
from jml.namespaces import (
    QualifiedName,
    extract_namespaces,
    find_default_uri,
    find_namespace_by_prefix,
    find_namespace_by_uri,
    split_name,
)


class TestSplitName:
    """Test splitting qualified names."""

    def test_unprefixed_name(self):
        assert split_name("person") == QualifiedName(prefix=None, local="person")

    def test_prefixed_name(self):
        assert split_name("ns:person") == QualifiedName(prefix="ns", local="person")

    def test_splits_at_first_colon(self):
        assert split_name("a:b:c") == QualifiedName(prefix="a", local="b:c")


class TestExtractNamespaces:
    """Test reading declarations out of attribute maps."""

    def test_no_declarations(self):
        assert extract_namespaces({"born": "yes"}) == []

    def test_default_and_prefixed(self):
        namespaces = extract_namespaces({
            "xmlns": "urn:default",
            "born": "yes",
            "xmlns:ns": "urn:x",
        })
        assert namespaces == [Namespace(None, "urn:default"), Namespace("ns", "urn:x")]

    def test_similar_attribute_names_ignored(self):
        """Only xmlns and xmlns:<prefix> are declarations."""
        assert extract_namespaces({"xmlnsfoo": "urn:x", "x:xmlns": "urn:y"}) == []


class TestFindNamespace:
    """Test lookups over declaration lists."""

    namespaces = [Namespace("a", "urn:a"), Namespace(None, "urn:default"), Namespace("b", "urn:b")]

    def test_default_uri(self):
        assert find_default_uri(self.namespaces) == "urn:default"

    def test_no_default_uri(self):
        assert find_default_uri([Namespace("a", "urn:a")]) is None

    def test_by_prefix(self):
        assert find_namespace_by_prefix(self.namespaces, "b") == Namespace("b", "urn:b")
        assert find_namespace_by_prefix(self.namespaces, "c") is None

    def test_by_uri(self):
        assert find_namespace_by_uri(self.namespaces, "urn:a") == Namespace("a", "urn:a")
        assert find_namespace_by_uri(self.namespaces, "urn:c") is None
