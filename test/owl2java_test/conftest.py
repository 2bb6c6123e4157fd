import pytest
import rdflib
from rdflib import Namespace, XSD

from owl2java.class_def import ClassDef
from owl2java.property_def import PropertyDef
from owl2java.repository import SchemaRepository
from owl2java.utils import PropertyType

ZOO = Namespace("http://www.example.org/zoo#")
PETS = Namespace("http://www.example.org/pets#")

ZOO_TTL = """
@prefix owl: <http://www.w3.org/2002/07/owl#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
@prefix zoo: <http://www.example.org/zoo#> .
@prefix pets: <http://www.example.org/pets#> .

zoo:Animal a owl:Class ;
    rdfs:comment "Any living animal kept in the zoo." .

zoo:name a owl:DatatypeProperty ;
    rdfs:domain zoo:Animal ;
    rdfs:range xsd:string .

zoo:Dog a owl:Class ;
    rdfs:subClassOf zoo:Animal ;
    rdfs:subClassOf [
        a owl:Restriction ;
        owl:onProperty zoo:breed ;
        owl:maxCardinality 1
    ] .

zoo:breed a owl:DatatypeProperty ;
    rdfs:domain zoo:Dog ;
    rdfs:range xsd:string ;
    rdfs:comment "The breed of the dog." .

[] rdfs:domain zoo:Dog .

zoo:Keeper a owl:Class .

zoo:caredBy a owl:ObjectProperty ;
    rdfs:domain zoo:Animal ;
    rdfs:range zoo:Keeper .

zoo:Pet a owl:Class .

pets:Companion a rdfs:Class .

pets:nickname rdfs:domain pets:Companion ;
    rdfs:range xsd:string .

zoo:GuideDog a owl:Class ;
    rdfs:subClassOf zoo:Dog, pets:Companion .

zoo:trainedSince a owl:DatatypeProperty ;
    rdfs:domain zoo:GuideDog ;
    rdfs:range xsd:int .

[] a owl:Class .
"""


@pytest.fixture
def zoo_graph() -> rdflib.Graph:
    graph = rdflib.Graph()
    graph.parse(data=ZOO_TTL, format="turtle")
    return graph


@pytest.fixture
def zoo_repository(zoo_graph) -> SchemaRepository:
    return SchemaRepository(zoo_graph)


@pytest.fixture
def zoo_ttl_file(tmp_path):
    path = tmp_path / "zoo.ttl"
    path.write_text(ZOO_TTL, encoding="utf-8")
    return path


@pytest.fixture
def animal() -> ClassDef:
    return ClassDef(
        uri=ZOO.Animal,
        comment="Any living animal kept in the zoo.",
        properties=[PropertyDef(ZOO.name, range_uri=XSD.string)],
    )


@pytest.fixture
def dog() -> ClassDef:
    return ClassDef(
        uri=ZOO.Dog,
        superclasses=[ZOO.Animal],
        properties=[PropertyDef(ZOO.breed, range_uri=XSD.string)],
    )


@pytest.fixture
def companion() -> ClassDef:
    return ClassDef(
        uri=PETS.Companion,
        properties=[
            PropertyDef(PETS.nickname, range_uri=XSD.string),
            PropertyDef(
                PETS.owner,
                property_type=PropertyType.OBJECT_PROPERTY,
                range_uri=ZOO.Keeper,
            ),
        ],
    )


@pytest.fixture
def guide_dog() -> ClassDef:
    return ClassDef(
        uri=ZOO.GuideDog,
        superclasses=[ZOO.Dog, PETS.Companion],
        properties=[PropertyDef(ZOO.trainedSince, range_uri=XSD.int)],
    )


@pytest.fixture
def pet() -> ClassDef:
    return ClassDef(uri=ZOO.Pet)


@pytest.fixture
def zoo_classes(animal, dog, companion, guide_dog, pet):
    return {c.uri: c for c in (animal, dog, companion, guide_dog, pet)}


@pytest.fixture
def zoo_packages():
    return {
        ZOO.Animal: "org.example.zoo",
        ZOO.Dog: "org.example.zoo",
        ZOO.GuideDog: "org.example.zoo",
        ZOO.Pet: "org.example.zoo",
        PETS.Companion: "org.example.pets",
    }
