#!/usr/bin/env python3
"""
Demo: Serialize the example TEI letter to HTML.

Shows the same document serialized with a mapping table, with a
mapping function, and as YAML.
"""

import logging

from jml.conversion import jml_to_yaml
from jml.examples import EXAMPLE_MAPPINGS, EXAMPLE_OPTIONS, build_example_document
from jml.serializer import serialize


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    document = build_example_document()

    print("=" * 80)
    print("JML SERIALIZER DEMO")
    print("=" * 80)

    print("\nSOURCE (YAML):")
    print("-" * 80)
    print(jml_to_yaml(document))

    print("\nMAPPING TABLE:")
    print("-" * 80)
    print(serialize(document, EXAMPLE_MAPPINGS, EXAMPLE_OPTIONS))

    print("\nMAPPING FUNCTION (text only):")
    print("-" * 80)
    print(serialize(document, lambda payload: payload.content))

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
