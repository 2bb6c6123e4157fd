from __future__ import annotations

import re
import textwrap
from enum import Enum
from functools import lru_cache

from typing_extensions import Any, List, Union

from rdflib import URIRef

JAVA_KEYWORDS = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
        "class", "const", "continue", "default", "do", "double", "else", "enum",
        "extends", "final", "finally", "float", "for", "goto", "if", "implements",
        "import", "instanceof", "int", "interface", "long", "native", "new",
        "package", "private", "protected", "public", "return", "short", "static",
        "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
        "transient", "try", "void", "volatile", "while", "true", "false", "null",
    }
)

COMMENT_WIDTH = 80


class PropertyType(str, Enum):
    """Enumeration of OWL property types."""

    OBJECT_PROPERTY = "ObjectProperty"
    DATA_PROPERTY = "DataProperty"


@lru_cache(maxsize=None)
def local_name(uri: Union[str, URIRef]) -> str:
    """
    The last fragment or path segment of a URI.

    :param uri: The URI to take the local name from.
    :return: The text after the last '#', or after the last '/' if there is no fragment.
    """
    s = str(uri)
    if "#" in s:
        return s.rsplit("#", 1)[1]
    return s.rstrip("/").rsplit("/", 1)[-1]


@lru_cache(maxsize=None)
def namespace_of(uri: Union[str, URIRef]) -> str:
    """The URI without its local name, keeping the trailing '#' or '/'."""
    s = str(uri)
    if "#" in s:
        return s.rsplit("#", 1)[0] + "#"
    return s.rstrip("/").rsplit("/", 1)[0] + "/"


def java_identifier(name: str) -> str:
    """Convert a name to a valid Java identifier"""
    name = re.sub(r"[^a-zA-Z0-9_$]", "_", name)
    if not name or name[0].isdigit() or name in JAVA_KEYWORDS:
        name = "_" + name
    return name


def type_name(uri: Any) -> str:
    """The Java type name for a class URI."""
    return java_identifier(local_name(uri))


def lower_first(name: str) -> str:
    """Convert a name like 'Animal' to 'animal'"""
    return name[:1].lower() + name[1:]


def upper_first(name: str) -> str:
    """Convert a name like 'hasName' to 'HasName'"""
    return name[:1].upper() + name[1:]


def instance_name(uri: Any) -> str:
    """
    The name of the field that holds a composed instance of the given class.

    :param uri: The class URI.
    :return: The local type name with its first character lower-cased.
    """
    name = lower_first(type_name(uri))
    if name in JAVA_KEYWORDS:
        name = "_" + name
    return name


def wrap_comment(text: str, width: int = COMMENT_WIDTH) -> List[str]:
    """
    Wrap a description into lines of at most `width` characters.

    Line breaks inside the description are treated as spaces. Words longer than the width
    are split.

    :param text: The description to wrap.
    :param width: The maximum line length.
    :return: The wrapped lines.
    """
    text = re.sub(r"\r?\n", " ", text)
    return textwrap.wrap(
        text, width=width, break_long_words=True, break_on_hyphens=False
    ) or [""]
