from __future__ import annotations

from dataclasses import dataclass, field

from rdflib import OWL, RDFS, URIRef
from typing_extensions import Dict, List, Optional

from . import logger
from .property_def import PropertyDef, load_properties
from .repository import SchemaRepository
from .utils import local_name

CLASS_TYPES = (OWL.Class, RDFS.Class)
"""
The class markers that are searched for, in search order. A class typed with both is
described by the later one.
"""


@dataclass
class ClassDef:
    """
    A class of the ontology together with its direct superclasses and its own properties.
    """

    uri: URIRef
    """
    The URI of the class.
    """

    comment: Optional[str] = None
    """
    The description of the class from its rdfs:comment.
    """

    superclasses: List[URIRef] = field(default_factory=list)
    """
    The direct superclasses, in the order the repository returned them.
    """

    properties: List[PropertyDef] = field(default_factory=list)
    """
    The properties whose domain is this class.
    """

    @property
    def name(self) -> str:
        return local_name(self.uri)

    def __str__(self):
        return f"class {self.name} extends {self.superclasses} {{\n\t{self.properties}\n}}\n"


def load_classes(conn: SchemaRepository) -> Dict[URIRef, ClassDef]:
    """
    Load all class definitions from the given repository.

    Subjects are enumerated for every class marker. When a subject is returned more than
    once, the last returned record replaces the earlier ones. The superclasses and
    properties of each class are queried once.

    :param conn: The repository to load the classes from.
    :return: The class definitions keyed by their URI.
    """
    comments: Dict[URIRef, Optional[str]] = {}
    for class_type in CLASS_TYPES:
        rows = conn.class_rows(class_type)
        logger.debug(f"[class_def] {len(rows)} results for {class_type}")
        for subject, comment in rows:
            if not isinstance(subject, URIRef):
                continue
            comments[subject] = str(comment) if comment is not None else None

    classes: Dict[URIRef, ClassDef] = {}
    for uri, comment in comments.items():
        classes[uri] = ClassDef(
            uri=uri,
            comment=comment,
            superclasses=conn.superclass_uris(uri),
            properties=load_properties(uri, conn),
        )
    logger.info(f"[class_def] Loaded {len(classes)} classes")
    return classes
