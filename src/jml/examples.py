"""
Example document for proof-of-concept serialization.

Builds a short TEI letter with a default namespace on the root and a
prefixed namespace for an embedded note, plus a mapping table that
turns it into plain HTML.
"""
from jml.mapping import Payload
from jml.model import ElementFragment, JmlObject, Namespace, SerializeOptions, TextFragment

TEI_NS = "http://www.tei-c.org/ns/1.0"
NOTES_NS = "urn:example:notes"


def _passthrough(payload: Payload) -> str:
    return payload.content


def _ref(payload: Payload) -> str:
    target = payload.attributes.get("target", "#")
    return f'<a href="{target}">{payload.content}</a>'


EXAMPLE_OPTIONS = SerializeOptions(
    namespaces=[
        Namespace(prefix="tei", uri=TEI_NS),
        Namespace(prefix="n", uri=NOTES_NS),
    ],
    skip_empty=True,
)

EXAMPLE_MAPPINGS = {
    "tei:TEI": "article",
    "tei:body": _passthrough,
    "tei:head": "h1",
    "tei:p": "p",
    "tei:ref": _ref,
    "tei:persName": "em",
    "n:note": "aside",
}


def build_example_document(recipient: str = "Ada") -> JmlObject:
    body = ElementFragment(
        name="body",
        elements=[
            ElementFragment(name="head", elements=[TextFragment("A letter")]),
            ElementFragment(
                name="p",
                elements=[
                    TextFragment("Dear "),
                    ElementFragment(name="persName", elements=[TextFragment(recipient)]),
                    TextFragment(", see "),
                    ElementFragment(
                        name="ref",
                        attributes={"target": "#notes"},
                        elements=[TextFragment("the notes")],
                    ),
                    TextFragment("."),
                ],
            ),
            # No mapping for <pb/>; it is dropped
            ElementFragment(name="pb", attributes={"n": "2"}),
            ElementFragment(name="p"),
            ElementFragment(
                name="x:note",
                attributes={"xmlns:x": NOTES_NS},
                elements=[TextFragment("Written in haste.")],
            ),
        ],
    )
    root = ElementFragment(name="TEI", attributes={"xmlns": TEI_NS}, elements=[body])
    return JmlObject(elements=[root])
