from __future__ import annotations

from dataclasses import dataclass, field

from rdflib import URIRef
from typing_extensions import Dict, List, Optional

from . import logger
from .class_def import ClassDef, load_classes
from .emitter import (
    PREDICATE_ANNOTATION_IMPORT,
    generate_class,
    generate_interface,
)
from .package_mapper import PackageMapper
from .repository import SchemaRepository


@dataclass
class GenerationOptions:
    """Options of a generation run."""

    flatten_class_structure: bool = True
    """
    Copy the properties of superclasses into implementation classes (True), or hold an
    instance of each superclass and delegate to it (False).
    """

    generate_annotations: bool = False
    """
    Mark generated fields with the predicate annotation.
    """

    separate_implementations: bool = False
    """
    Put implementation classes into an 'impl' sub-package of their interfaces.
    """

    annotation_import: str = PREDICATE_ANNOTATION_IMPORT
    base_package: Optional[str] = None
    package_overrides: Dict[str, str] = field(default_factory=dict)


class OwlToJavaGenerator:
    """High-level generator for turning an ontology schema into Java sources."""

    def __init__(
        self,
        repository: SchemaRepository,
        options: Optional[GenerationOptions] = None,
    ):
        """
        Initialize the generator.
        :param repository: The repository the schema is queried from.
        :param options: The options of the generation run.
        """
        self.repository = repository
        self.options = options or GenerationOptions()
        self.package_mapper = PackageMapper(
            self.options.base_package, dict(self.options.package_overrides)
        )
        self.classes: Dict[URIRef, ClassDef] = {}
        self.packages: Dict[URIRef, str] = {}

    def load(self) -> Dict[URIRef, ClassDef]:
        """
        Load the class definitions and assign packages to them and to their superclasses.
        :return: The class definitions keyed by URI.
        """
        self.classes = load_classes(self.repository)
        uris = list(self.classes)
        for clazz in self.classes.values():
            uris.extend(clazz.superclasses)
        self.packages = self.package_mapper.package_map(uris)
        return self.classes

    def write(self, target_dir: str) -> List[str]:
        """
        Write the interface of every class and the implementation of every class with
        properties.

        :param target_dir: The source root to write into.
        :return: The paths of all written files.
        """
        if not self.classes:
            self.load()
        written: List[str] = []
        for clazz in self.classes.values():
            written.append(generate_interface(clazz, target_dir, self.packages))
            implementation = generate_class(
                clazz,
                target_dir,
                self.packages,
                self.classes,
                self.options.flatten_class_structure,
                self.options.generate_annotations,
                self.options.separate_implementations,
                self.options.annotation_import,
            )
            if implementation is not None:
                written.append(implementation)
        logger.info(
            f"[generator] Wrote {len(written)} files for {len(self.classes)} classes to {target_dir}"
        )
        return written
