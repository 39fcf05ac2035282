"""
Generation of C# data classes matching the shape of a JSON document.

Two document layouts are supported:

    // user.json
    {
        "accountHolder": {
            "name": "string",
            "login": { "email": "string" }
        }
    }

A single top-level property holding an object becomes the main class
(``AccountHolder`` here, not ``User``).

    // user.json
    {
        "name": "string",
        "login": { "email": "string" }
    }

Otherwise the file name gives the main class (``User``) and the top-level
properties become its properties.

Nested objects are extracted as classes of their own, nested classes first.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

from ..code import create_class, create_namespace, create_property
from ..builders import ClassBuilder, PropertyBuilder
from ..utils import to_pascal_case
from .config import JsonToNetConfig

logger = logging.getLogger(__name__)


def json_type_to_net(value) -> str | None:
    """Return the C# type of a simple JSON value, or None for objects, arrays and null."""
    # bool is a subclass of int
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "double"
    if isinstance(value, str):
        return "string"
    return None


def from_json(name: str, contents: str, config: JsonToNetConfig | None = None) -> str:
    """
    Generate the C# source code of the classes described by a JSON document.

    Args:
        name: Name of the JSON file, without extension
        contents: The JSON document
        config: Namespace and usings of the generated file

    Returns:
        C# source code

    Raises:
        json.JSONDecodeError: If the contents are not valid JSON
        ValueError: If the document is not a JSON object
    """
    config = config or JsonToNetConfig()
    document = json.loads(contents)
    if not isinstance(document, dict):
        raise ValueError(f"The top level of '{name}' must be a JSON object")

    namespace = create_namespace(config.namespace).with_usings(config.usings)

    if not (len(document) == 1 and isinstance(next(iter(document.values())), dict)):
        namespace.with_class(create_class(to_pascal_case(name)).with_properties(extract_properties(document)))

    classes = list(extract_classes(document))
    logger.info("Extracted %d nested classes from '%s'", len(classes), name)
    return namespace.with_classes(classes).to_source_code()


def extract_classes(document: dict) -> Iterator[ClassBuilder]:
    """Yield a class for every object value, nested classes before the class containing them."""
    for key, value in document.items():
        if isinstance(value, dict):
            yield from extract_classes(value)
            yield create_class(to_pascal_case(key)).with_properties(extract_properties(value))


def extract_properties(document: dict) -> list[PropertyBuilder]:
    """Return the properties of a class: simple values first, then objects, then arrays."""
    simple = [
        create_property(json_type_to_net(value), to_pascal_case(key))
        for key, value in document.items()
        if json_type_to_net(value) is not None
    ]
    objects = [
        create_property(to_pascal_case(key), to_pascal_case(key))
        for key, value in document.items()
        if isinstance(value, dict)
    ]
    arrays = []
    for key, value in document.items():
        if not isinstance(value, list):
            continue
        item_types = {json_type_to_net(item) for item in value}
        if len(item_types) == 1 and None not in item_types:
            arrays.append(create_property(f"{item_types.pop()}[]", to_pascal_case(key)))
        else:
            logger.debug("Skipping array '%s': its items are not of a single simple type", key)
    return simple + objects + arrays
