from rdflib import URIRef

from owl2java.utils import (
    instance_name,
    java_identifier,
    local_name,
    namespace_of,
    wrap_comment,
)


def test_local_name_and_namespace():
    assert local_name(URIRef("http://www.example.org/zoo#Dog")) == "Dog"
    assert local_name("http://xmlns.com/foaf/0.1/Person") == "Person"
    assert namespace_of("http://www.example.org/zoo#Dog") == "http://www.example.org/zoo#"
    assert namespace_of("http://xmlns.com/foaf/0.1/Person") == "http://xmlns.com/foaf/0.1/"


def test_java_identifier():
    assert java_identifier("has-name") == "has_name"
    assert java_identifier("3D") == "_3D"
    assert java_identifier("int") == "_int"


def test_instance_name():
    assert instance_name(URIRef("http://www.example.org/zoo#GuideDog")) == "guideDog"
    assert instance_name(URIRef("http://www.example.org/zoo#Int")) == "_int"


def test_wrap_comment():
    lines = wrap_comment("word " * 40, width=20)

    assert all(len(line) <= 20 for line in lines)
    assert " ".join(lines) == ("word " * 40).strip()


def test_wrap_comment_splits_long_words_and_newlines():
    lines = wrap_comment("first\r\nsecond " + "x" * 30, width=10)

    assert lines[0] == "first"
    assert all(len(line) <= 10 for line in lines)
