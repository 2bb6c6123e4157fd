from __future__ import annotations

import re
from dataclasses import dataclass

from rdflib import OWL, RDFS, XSD, URIRef
from typing_extensions import ClassVar, Dict, List, Optional

from .rendering import default_renderer
from .repository import SchemaRepository
from .utils import PropertyType, java_identifier, local_name, type_name, upper_first


@dataclass
class PropertyDef:
    """
    A property of an ontology class, rendered as a Java field with a getter and a setter.
    """

    uri: URIRef
    property_type: PropertyType = PropertyType.DATA_PROPERTY
    range_uri: Optional[URIRef] = None
    comment: Optional[str] = None

    XSD_TO_JAVA_TYPES: ClassVar[Dict[URIRef, str]] = {
        XSD.string: "String",
        XSD.normalizedString: "String",
        XSD.token: "String",
        XSD.language: "String",
        XSD.boolean: "Boolean",
        XSD.decimal: "java.math.BigDecimal",
        XSD.float: "Float",
        XSD.double: "Double",
        XSD.integer: "java.math.BigInteger",
        XSD.nonPositiveInteger: "java.math.BigInteger",
        XSD.negativeInteger: "java.math.BigInteger",
        XSD.nonNegativeInteger: "java.math.BigInteger",
        XSD.positiveInteger: "java.math.BigInteger",
        XSD.long: "Long",
        XSD.int: "Integer",
        XSD.short: "Short",
        XSD.byte: "Byte",
        XSD.unsignedLong: "java.math.BigInteger",
        XSD.unsignedInt: "Long",
        XSD.unsignedShort: "Integer",
        XSD.unsignedByte: "Short",
        XSD.date: "java.util.Date",
        XSD.dateTime: "java.util.Date",
        XSD.time: "java.util.Date",
        XSD.anyURI: "java.net.URI",
    }

    @property
    def name(self) -> str:
        """The Java field name of the property."""
        return java_identifier(local_name(self.uri))

    @property
    def accessor_suffix(self) -> str:
        """The part of the getter and setter names after 'get' and 'set'."""
        return upper_first(self.name)

    @property
    def java_type(self) -> str:
        """
        The Java type of the field.

        Datatype ranges are mapped to Java types, any other range of an object property is
        the interface generated for the range class.
        """
        if self.property_type == PropertyType.OBJECT_PROPERTY:
            if self.range_uri is None or self.range_uri in (OWL.Thing, RDFS.Resource):
                return "Object"
            return type_name(self.range_uri)
        return self.XSD_TO_JAVA_TYPES.get(self.range_uri, "String")

    def render_field(self, indent: str, with_annotation: bool) -> str:
        """
        Render the field declaration of this property.

        :param indent: The indentation of every emitted line.
        :param with_annotation: Whether to mark the field with its predicate URI.
        :return: The Java source of the field and its doc comment.
        """
        return default_renderer().render(
            "property_field.j2",
            indent=indent,
            with_annotation=with_annotation,
            uri=str(self.uri),
            comment=self._doc_comment(),
            java_type=self.java_type,
            name=self.name,
        )

    def render_accessors(
        self,
        indent: str,
        include_body: bool,
        delegate_instance_name: Optional[str] = None,
    ) -> str:
        """
        Render the getter and setter of this property.

        :param indent: The indentation of every emitted line.
        :param include_body: False to render declarations only, as used in interfaces.
        :param delegate_instance_name: The field holding a composed instance that the
            accessors forward to. None to read and write the field of this property directly.
        :return: The Java source of the accessor pair.
        """
        return default_renderer().render(
            "property_accessors.j2",
            indent=indent,
            include_body=include_body,
            delegate=delegate_instance_name,
            java_type=self.java_type,
            name=self.name,
            accessor_suffix=self.accessor_suffix,
        )

    def _doc_comment(self) -> str:
        if self.comment:
            return re.sub(r"\s+", " ", self.comment).strip()
        return str(self.uri)

    def __repr__(self):
        return f"{self.java_type} {self.name}"


def _property_type_of(types: List[URIRef], range_uri: Optional[URIRef]) -> PropertyType:
    if OWL.ObjectProperty in types:
        return PropertyType.OBJECT_PROPERTY
    if OWL.DatatypeProperty in types:
        return PropertyType.DATA_PROPERTY
    if range_uri is None or range_uri == RDFS.Literal or str(range_uri).startswith(
        str(XSD)
    ):
        return PropertyType.DATA_PROPERTY
    return PropertyType.OBJECT_PROPERTY


def load_properties(class_uri: URIRef, conn: SchemaRepository) -> List[PropertyDef]:
    """
    Load the properties whose domain is the given class.

    Properties keep the order in which the repository returns them. When a property has
    several ranges or comments, the first one returned is used.

    :param class_uri: The class to load the properties of.
    :param conn: The repository to query.
    :return: The property definitions of the class.
    """
    ranges: Dict[URIRef, Optional[URIRef]] = {}
    comments: Dict[URIRef, Optional[str]] = {}
    types: Dict[URIRef, List[URIRef]] = {}
    for row in conn.property_rows(class_uri):
        if not isinstance(row.property, URIRef):
            continue
        prop = row.property
        ranges.setdefault(prop, None)
        comments.setdefault(prop, None)
        types.setdefault(prop, [])
        if ranges[prop] is None and isinstance(row.range, URIRef):
            ranges[prop] = row.range
        if comments[prop] is None and row.comment is not None:
            comments[prop] = str(row.comment)
        if isinstance(row.property_type, URIRef):
            types[prop].append(row.property_type)

    return [
        PropertyDef(
            uri=prop,
            property_type=_property_type_of(types[prop], ranges[prop]),
            range_uri=ranges[prop],
            comment=comments[prop],
        )
        for prop in ranges
    ]
