"""
Read access to the schema that code is generated from.

The repository wraps an rdflib graph, which may be an in-memory graph parsed from ontology
files or a graph backed by a remote SPARQL endpoint. All discovery is done through SPARQL
queries so that both backends behave the same.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax import SAXParseException

import rdflib
from rdflib import RDF, RDFS, URIRef
from rdflib.plugins.stores.sparqlstore import SPARQLStore
from rdflib.util import guess_format
from typing_extensions import Iterable, Iterator, List, Optional, Tuple

from . import logger
from .exceptions import OntologyLoadError

CLASS_QUERY = """
SELECT ?cls ?comment WHERE {
    ?cls rdf:type ?classType .
    OPTIONAL { ?cls rdfs:comment ?comment }
}
"""

SUPERCLASS_QUERY = """
SELECT ?superclass WHERE {
    ?cls rdfs:subClassOf ?superclass .
}
"""

PROPERTY_QUERY = """
SELECT ?property ?range ?comment ?propertyType WHERE {
    ?property rdfs:domain ?cls .
    OPTIONAL { ?property rdfs:range ?range }
    OPTIONAL { ?property rdfs:comment ?comment }
    OPTIONAL { ?property rdf:type ?propertyType }
}
"""

NAMESPACES = {"rdf": RDF, "rdfs": RDFS}


@dataclass
class PropertyRow:
    """One binding of the property query."""

    property: rdflib.term.Node
    range: Optional[rdflib.term.Node] = None
    comment: Optional[rdflib.term.Node] = None
    property_type: Optional[rdflib.term.Node] = None


class SchemaRepository:
    """Connection to a schema graph that answers the queries needed for code generation."""

    def __init__(self, graph: Optional[rdflib.Graph] = None):
        """
        Initialize the repository.
        :param graph: The graph to query, an empty in-memory graph if not given.
        """
        self.graph = graph if graph is not None else rdflib.Graph()

    @classmethod
    def from_files(cls, paths: Iterable[str]) -> SchemaRepository:
        """
        Parse ontology files into a single in-memory graph.

        :param paths: Paths to the ontology files, the serialization format is guessed from
            the file extension.
        :return: A repository over the merged graph.
        """
        repository = cls()
        for path in paths:
            repository.load(path)
        return repository

    @classmethod
    def from_endpoint(cls, endpoint: str) -> SchemaRepository:
        """
        Query a remote SPARQL endpoint instead of a local graph.

        :param endpoint: The URL of the SPARQL query endpoint.
        :return: A repository whose queries are sent to the endpoint.
        """
        logger.info(f"[repository] Using SPARQL endpoint {endpoint}")
        return cls(rdflib.Graph(store=SPARQLStore(query_endpoint=endpoint)))

    def load(self, path: str, format: Optional[str] = None):
        """
        Parse an ontology file into the graph.
        :param path: Path to the ontology file.
        :param format: The rdflib serialization format, guessed when not given.
        """
        if format is None:
            format = guess_format(path)
        try:
            self.graph.parse(path, format=format)
        except (SyntaxError, ValueError, SAXParseException) as e:
            raise OntologyLoadError(str(path), str(e)) from e
        logger.info(f"[repository] Loaded {path} ({len(self.graph)} triples in graph)")

    def _select(self, query: str, **bindings) -> Iterator[rdflib.query.ResultRow]:
        return iter(
            self.graph.query(query, initNs=NAMESPACES, initBindings=bindings)
        )

    def class_rows(
        self, class_type: URIRef
    ) -> List[Tuple[rdflib.term.Node, Optional[rdflib.term.Node]]]:
        """
        Enumerate all subjects typed as the given class marker.

        :param class_type: The class marker, e.g. owl:Class or rdfs:Class.
        :return: (subject, comment) pairs, the comment is None when there is none.
            A subject with several comments appears once per comment.
        """
        return [
            (row.cls, row.comment)
            for row in self._select(CLASS_QUERY, classType=class_type)
        ]

    def superclass_uris(self, uri: URIRef) -> List[URIRef]:
        """
        The direct superclasses of a class, in result order.

        Superclasses that are not URIs, such as restrictions, are skipped. Duplicates are kept.

        :param uri: The class to find the superclasses of.
        :return: The URIs of the superclasses.
        """
        return [
            row.superclass
            for row in self._select(SUPERCLASS_QUERY, cls=uri)
            if isinstance(row.superclass, URIRef)
        ]

    def property_rows(self, class_uri: URIRef) -> List[PropertyRow]:
        """
        All properties whose domain is the given class, with their optional details.

        :param class_uri: The domain class.
        :return: One row per binding; a property with several ranges, comments or types
            appears more than once.
        """
        return [
            PropertyRow(row.property, row.range, row.comment, row.propertyType)
            for row in self._select(PROPERTY_QUERY, cls=class_uri)
        ]
