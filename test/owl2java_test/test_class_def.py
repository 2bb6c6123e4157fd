import pytest
from rdflib import BNode, Literal, Namespace, OWL, RDF, RDFS

from owl2java.class_def import ClassDef, load_classes

ZOO = Namespace("http://www.example.org/zoo#")
PETS = Namespace("http://www.example.org/pets#")


def test_load_classes_from_both_class_markers(zoo_repository):
    classes = load_classes(zoo_repository)

    assert set(classes) == {
        ZOO.Animal,
        ZOO.Dog,
        ZOO.Keeper,
        ZOO.Pet,
        ZOO.GuideDog,
        PETS.Companion,
    }
    assert all(isinstance(c, ClassDef) for c in classes.values())


def test_blank_node_classes_are_skipped(zoo_repository):
    classes = load_classes(zoo_repository)

    assert not any(isinstance(uri, BNode) for uri in classes)


def test_comment_is_optional(zoo_repository):
    classes = load_classes(zoo_repository)

    assert classes[ZOO.Animal].comment == "Any living animal kept in the zoo."
    assert classes[ZOO.Dog].comment is None


def test_superclasses_only_contain_uris(zoo_repository):
    classes = load_classes(zoo_repository)

    assert classes[ZOO.Dog].superclasses == [ZOO.Animal]
    assert set(classes[ZOO.GuideDog].superclasses) == {ZOO.Dog, PETS.Companion}
    assert classes[ZOO.Animal].superclasses == []


def test_properties_are_scoped_to_their_domain(zoo_repository):
    classes = load_classes(zoo_repository)

    assert [p.name for p in classes[ZOO.Dog].properties] == ["breed"]
    assert {p.name for p in classes[ZOO.Animal].properties} == {"name", "caredBy"}
    assert [p.name for p in classes[PETS.Companion].properties] == ["nickname"]
    assert classes[ZOO.Pet].properties == []


def test_dual_typed_class_appears_once(zoo_graph, zoo_repository):
    zoo_graph.add((ZOO.Pet, RDFS.subClassOf, ZOO.Animal))
    zoo_graph.add((ZOO.Pet, RDF.type, RDFS.Class))

    classes = load_classes(zoo_repository)

    assert list(classes).count(ZOO.Pet) == 1
    assert classes[ZOO.Pet].superclasses == [ZOO.Animal]


class RecordingRepository:
    """Repository stub that answers each class marker with its own rows."""

    def __init__(self, rows_by_type):
        self.rows_by_type = rows_by_type
        self.superclass_queries = []

    def class_rows(self, class_type):
        return self.rows_by_type.get(class_type, [])

    def superclass_uris(self, uri):
        self.superclass_queries.append(uri)
        return []

    def property_rows(self, class_uri):
        return []


def test_later_class_marker_overwrites_earlier_record():
    repository = RecordingRepository(
        {
            OWL.Class: [(ZOO.Cat, Literal("From OWL")), (ZOO.Lion, Literal("A lion"))],
            RDFS.Class: [(ZOO.Cat, Literal("From RDFS")), (ZOO.Lion, None)],
        }
    )

    classes = load_classes(repository)

    assert list(classes) == [ZOO.Cat, ZOO.Lion]
    assert classes[ZOO.Cat].comment == "From RDFS"
    assert classes[ZOO.Lion].comment is None
    assert repository.superclass_queries == [ZOO.Cat, ZOO.Lion]


def test_query_faults_abort_the_load():
    class FailingRepository(RecordingRepository):
        def superclass_uris(self, uri):
            raise ConnectionError("repository went away")

    repository = FailingRepository({OWL.Class: [(ZOO.Cat, None)]})

    with pytest.raises(ConnectionError):
        load_classes(repository)


def test_str_lists_superclasses_and_properties(dog):
    text = str(dog)

    assert text.startswith("class Dog extends")
    assert "String breed" in text
