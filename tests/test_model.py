"""
Tests for JML Core Model Objects

These tests verify:
    - Fragment creation and fixed type tags
    - Immutability of fragments and namespaces
    - JmlObject root access
    - Option defaults
"""

import dataclasses

import pytest
from jml.model import (
    ElementFragment,
    FragmentType,
    JmlObject,
    Namespace,
    SerializeOptions,
    TextFragment,
)


class TestFragments:
    """Test element and text fragments."""

    def test_element_defaults(self):
        """Element without attributes or children gets empty containers."""
        element = ElementFragment(name="person")
        assert element.name == "person"
        assert element.attributes == {}
        assert element.elements == []
        assert element.type == FragmentType.ELEMENT

    def test_text_fragment_type(self):
        """Text fragments are tagged TEXT."""
        text = TextFragment("hi")
        assert text.text == "hi"
        assert text.type == FragmentType.TEXT

    def test_type_cannot_be_passed(self):
        """The type tag is not an init argument."""
        with pytest.raises(TypeError):
            TextFragment(text="hi", type=FragmentType.ELEMENT)

    def test_fragments_are_immutable(self):
        """Fragments are frozen."""
        element = ElementFragment(name="person")
        with pytest.raises(dataclasses.FrozenInstanceError):
            element.name = "animal"
        with pytest.raises(dataclasses.FrozenInstanceError):
            element.type = FragmentType.TEXT

    def test_default_containers_not_shared(self):
        """Each element gets its own attribute map."""
        assert ElementFragment(name="a").attributes is not ElementFragment(name="b").attributes

    def test_equality(self):
        """Fragments compare by value."""
        assert ElementFragment(name="a", elements=[TextFragment("x")]) == ElementFragment(
            name="a", elements=[TextFragment("x")]
        )


class TestJmlObject:
    """Test the root container."""

    def test_root_is_first_fragment(self):
        first = ElementFragment(name="first")
        jml_object = JmlObject(elements=[first, ElementFragment(name="second")])
        assert jml_object.root is first

    def test_empty_root(self):
        assert JmlObject().root is None


class TestNamespaceAndOptions:
    """Test namespaces and serialize options."""

    def test_default_namespace_has_no_prefix(self):
        ns = Namespace(prefix=None, uri="urn:x")
        assert ns.prefix is None

    def test_namespace_immutable(self):
        ns = Namespace(prefix="p", uri="urn:x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            ns.uri = "urn:y"

    def test_option_defaults(self):
        options = SerializeOptions()
        assert options.namespaces == []
        assert options.skip_empty is False
