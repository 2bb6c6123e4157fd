"""
Rendering of class definitions into Java interfaces and implementation classes.

Every class is rendered into a :class:`JavaSourceDocument` first, which is then serialized
through a Jinja2 template. Ontologies allow multiple inheritance while Java only allows a
single superclass, so an implementation class implements the interfaces of all its direct
superclasses and gets their properties through one of two layouts:

* :class:`FlattenLayout` copies the properties of the superclasses into the class.
* :class:`DelegateLayout` holds one instance per superclass and forwards to it.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass, field

from rdflib import URIRef
from typing_extensions import Dict, List, Mapping, Optional

from . import logger
from .class_def import ClassDef
from .exceptions import MissingPackageMappingError, UnresolvedSuperclassError
from .property_def import PropertyDef
from .rendering import JinjaRenderer, default_renderer
from .utils import instance_name, type_name, wrap_comment

INDENT = "\t"

IMPL_PACKAGE = "impl"

PREDICATE_ANNOTATION_IMPORT = "org.openimaj.rdf.serialize.Predicate"


@dataclass
class JavaSourceDocument:
    """
    The structure of one Java compilation unit before it is serialized.
    """

    package: str
    declaration: str
    comment_lines: List[str] = field(default_factory=list)
    imports: List[str] = field(default_factory=list)
    members: List[str] = field(default_factory=list)
    """
    Rendered fields and methods, in output order.
    """

    def render(self, renderer: Optional[JinjaRenderer] = None) -> str:
        """
        Serialize the document to Java source.
        :param renderer: The renderer to use, the package templates by default.
        :return: The Java source, ending with a newline.
        """
        renderer = renderer or default_renderer()
        return (
            renderer.render(
                "compilation_unit.j2",
                package=self.package,
                imports=self.imports,
                comment_lines=self.comment_lines,
                declaration=self.declaration,
                members=self.members,
            )
            + "\n"
        )


def package_of(uri: URIRef, packages: Mapping[URIRef, str]) -> str:
    """
    Look up the package of a class.

    :param uri: The class URI.
    :param packages: The package map of the generation run.
    :return: The package of the class.
    """
    try:
        return packages[uri]
    except KeyError:
        raise MissingPackageMappingError(uri) from None


def superclass_def(
    clazz: ClassDef, superclass: URIRef, classes: Mapping[URIRef, ClassDef]
) -> ClassDef:
    """
    Look up the definition of a direct superclass of a class.

    :param clazz: The class whose superclass is looked up.
    :param superclass: The URI of the superclass.
    :param classes: All class definitions of the generation run.
    :return: The definition of the superclass.
    """
    try:
        return classes[superclass]
    except KeyError:
        raise UnresolvedSuperclassError(clazz.uri, superclass) from None


def class_comment_lines(clazz: ClassDef) -> List[str]:
    """
    The lines of the doc comment of a class, without the comment markers.

    :param clazz: The class to describe.
    :return: The wrapped description, or the URI of the class if it has none.
    """
    if clazz.comment is None:
        return [str(clazz.uri)]
    return wrap_comment(clazz.comment)


def superclass_imports(clazz: ClassDef, packages: Mapping[URIRef, str]) -> List[str]:
    """
    The wildcard imports of the packages of the superclasses of a class.

    :param clazz: The class to compute the imports for.
    :param packages: The package map of the generation run.
    :return: Sorted imports without duplicates and without the package of the class itself.
    """
    imports = {package_of(superclass, packages) for superclass in clazz.superclasses}
    imports.discard(package_of(clazz.uri, packages))
    return [f"{package}.*" for package in sorted(imports)]


def distinct_superclasses(clazz: ClassDef) -> List[URIRef]:
    """The direct superclasses of a class without repetitions and without the class itself."""
    return [
        superclass
        for superclass in dict.fromkeys(clazz.superclasses)
        if superclass != clazz.uri
    ]


def superclass_references(
    clazz: ClassDef, packages: Mapping[URIRef, str]
) -> Dict[URIRef, str]:
    """
    The Java type names under which the direct superclasses of a class are referenced.

    A superclass is referenced by its simple name unless that name is also the name of the
    class itself or of another direct superclass. Then it is qualified with its package.

    :param clazz: The class whose superclasses are referenced.
    :param packages: The package map of the generation run.
    :return: One reference per distinct superclass URI, in declaration order.
    """
    superclasses = distinct_superclasses(clazz)
    simple_names = Counter(type_name(superclass) for superclass in superclasses)
    references: Dict[URIRef, str] = {}
    for superclass in superclasses:
        name = type_name(superclass)
        if name == type_name(clazz.uri) or simple_names[name] > 1:
            name = f"{package_of(superclass, packages)}.{name}"
        references[superclass] = name
    return references


@dataclass
class Delegate:
    """A superclass instance held by an implementation class in the delegate layout."""

    field_name: str
    type_reference: str
    definition: ClassDef


class PropertyLayout(ABC):
    """Strategy for materializing the properties of a class and its superclasses."""

    @abstractmethod
    def members(
        self,
        clazz: ClassDef,
        classes: Mapping[URIRef, ClassDef],
        packages: Mapping[URIRef, str],
        generate_annotations: bool,
    ) -> List[str]:
        """
        Render the fields and accessors of an implementation class.

        :param clazz: The class to render.
        :param classes: All class definitions, used to look up superclasses.
        :param packages: The package map of the generation run.
        :param generate_annotations: Whether fields are marked with their predicate.
        :return: The rendered members in output order.
        """
        ...


class FlattenLayout(PropertyLayout):
    """
    Declares the properties of the direct superclasses as fields of the class itself.
    """

    def properties(
        self, clazz: ClassDef, classes: Mapping[URIRef, ClassDef]
    ) -> List[PropertyDef]:
        """
        The own properties of the class followed by those of each distinct direct superclass.
        """
        properties = list(clazz.properties)
        for superclass in distinct_superclasses(clazz):
            properties.extend(superclass_def(clazz, superclass, classes).properties)
        return properties

    def members(
        self,
        clazz: ClassDef,
        classes: Mapping[URIRef, ClassDef],
        packages: Mapping[URIRef, str],
        generate_annotations: bool,
    ) -> List[str]:
        properties = self.properties(clazz, classes)
        return [p.render_field(INDENT, generate_annotations) for p in properties] + [
            p.render_accessors(INDENT, True, None) for p in properties
        ]


class DelegateLayout(PropertyLayout):
    """
    Holds an instance of every direct superclass and forwards inherited accessors to it.
    """

    def delegates(
        self,
        clazz: ClassDef,
        classes: Mapping[URIRef, ClassDef],
        packages: Mapping[URIRef, str],
    ) -> List[Delegate]:
        """
        One delegate per distinct direct superclass, in declaration order.

        Field names are the instance names of the superclasses. A name that is already
        taken gets the smallest numeric suffix, starting at 2, that makes it unique.
        """
        delegates: List[Delegate] = []
        taken = {p.name for p in clazz.properties}
        for superclass, reference in superclass_references(clazz, packages).items():
            base = instance_name(superclass)
            name, suffix = base, 2
            while name in taken:
                name, suffix = f"{base}{suffix}", suffix + 1
            taken.add(name)
            delegates.append(
                Delegate(name, reference, superclass_def(clazz, superclass, classes))
            )
        return delegates

    def members(
        self,
        clazz: ClassDef,
        classes: Mapping[URIRef, ClassDef],
        packages: Mapping[URIRef, str],
        generate_annotations: bool,
    ) -> List[str]:
        delegates = self.delegates(clazz, classes, packages)
        members = [p.render_field(INDENT, generate_annotations) for p in clazz.properties]
        for delegate in delegates:
            members.append(
                f"{INDENT}/** {type_name(delegate.definition.uri)} instance */\n"
                f"{INDENT}private {delegate.type_reference} {delegate.field_name};"
            )
        members.extend(p.render_accessors(INDENT, True, None) for p in clazz.properties)
        for delegate in delegates:
            members.extend(
                p.render_accessors(INDENT, True, delegate.field_name)
                for p in delegate.definition.properties
            )
        return members


def layout_for(flatten_class_structure: bool) -> PropertyLayout:
    """The property layout for the flatten flag of a generation run."""
    return FlattenLayout() if flatten_class_structure else DelegateLayout()


def build_interface(clazz: ClassDef, packages: Mapping[URIRef, str]) -> JavaSourceDocument:
    """
    Build the Java interface of a class.

    The interface declares the accessors of the own properties of the class. It does not
    extend the interfaces of the superclasses; implementation classes implement those
    directly.

    :param clazz: The class to build the interface for.
    :param packages: The package map of the generation run.
    :return: The interface document.
    """
    return JavaSourceDocument(
        package=package_of(clazz.uri, packages),
        declaration=f"public interface {type_name(clazz.uri)}",
        comment_lines=class_comment_lines(clazz),
        members=[p.render_accessors(INDENT, False, None) for p in clazz.properties],
    )


def build_implementation(
    clazz: ClassDef,
    packages: Mapping[URIRef, str],
    classes: Mapping[URIRef, ClassDef],
    flatten_class_structure: bool,
    generate_annotations: bool,
    separate_implementations: bool,
    annotation_import: str = PREDICATE_ANNOTATION_IMPORT,
) -> Optional[JavaSourceDocument]:
    """
    Build the Java implementation class of a class.

    :param clazz: The class to build the implementation for.
    :param packages: The package map of the generation run.
    :param classes: All class definitions of the generation run.
    :param flatten_class_structure: Whether to copy the superclass properties into the
        class (True) or to delegate to superclass instances (False).
    :param generate_annotations: Whether to mark fields with their predicate annotation.
    :param separate_implementations: Whether implementations live in an 'impl' sub-package.
    :param annotation_import: The annotation type imported when annotations are generated.
    :return: The implementation document, or None if the class has no properties.
    """
    if not clazz.properties:
        return None

    package = package_of(clazz.uri, packages)
    imports: List[str] = []
    if separate_implementations:
        imports.append(f"{package}.*")
        package = f"{package}.{IMPL_PACKAGE}"
    if generate_annotations:
        imports.append(annotation_import)
    imports.extend(superclass_imports(clazz, packages))

    references = superclass_references(clazz, packages)
    own_reference = type_name(clazz.uri)
    if own_reference in {type_name(superclass) for superclass in references}:
        own_reference = f"{package_of(clazz.uri, packages)}.{own_reference}"
    interfaces = [own_reference] + list(references.values())

    layout = layout_for(flatten_class_structure)
    return JavaSourceDocument(
        package=package,
        declaration=f"public class {type_name(clazz.uri)}Impl implements {', '.join(interfaces)}",
        comment_lines=class_comment_lines(clazz),
        imports=imports,
        members=layout.members(clazz, classes, packages, generate_annotations),
    )


def _write(target_dir: str, package: str, file_name: str, source: str) -> str:
    path = os.path.join(target_dir, *package.split("."))
    os.makedirs(path, exist_ok=True)
    file_path = os.path.join(path, file_name)
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(source)
    logger.debug(f"[emitter] Wrote {file_path}")
    return file_path


def generate_interface(
    clazz: ClassDef, target_dir: str, packages: Mapping[URIRef, str]
) -> str:
    """
    Write the Java interface file of a class.

    :param clazz: The class to write the interface for.
    :param target_dir: The source root the package directories are created in.
    :param packages: The package map of the generation run.
    :return: The path of the written file.
    """
    document = build_interface(clazz, packages)
    return _write(
        target_dir, document.package, f"{type_name(clazz.uri)}.java", document.render()
    )


def generate_class(
    clazz: ClassDef,
    target_dir: str,
    packages: Mapping[URIRef, str],
    classes: Mapping[URIRef, ClassDef],
    flatten_class_structure: bool,
    generate_annotations: bool,
    separate_implementations: bool,
    annotation_import: str = PREDICATE_ANNOTATION_IMPORT,
) -> Optional[str]:
    """
    Write the Java implementation file of a class.

    Classes without properties do not get an implementation file.

    :return: The path of the written file, or None if nothing was written.
    """
    document = build_implementation(
        clazz,
        packages,
        classes,
        flatten_class_structure,
        generate_annotations,
        separate_implementations,
        annotation_import,
    )
    if document is None:
        logger.debug(f"[emitter] No properties in {clazz.uri}, skipping implementation")
        return None
    return _write(
        target_dir,
        document.package,
        f"{type_name(clazz.uri)}Impl.java",
        document.render(),
    )
