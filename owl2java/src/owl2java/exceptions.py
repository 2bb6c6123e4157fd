from __future__ import annotations

from dataclasses import dataclass

from typing_extensions import Any


@dataclass
class MissingPackageMappingError(KeyError):
    """
    Raised when a class that takes part in code generation has no Java package assigned.

    Every class that is emitted, and every superclass it refers to, must be present in the
    package map. A missing entry means the package map was built from a different schema
    than the one being emitted.
    """

    uri: Any
    """
    The class URI that has no package.
    """

    def __post_init__(self):
        KeyError.__init__(
            self,
            f"No Java package is mapped for class {self.uri}. "
            f"Was the package map built for all classes and their superclasses?",
        )

    def __str__(self):
        return self.args[0]


@dataclass
class UnresolvedSuperclassError(KeyError):
    """
    Raised when a superclass URI of a class is not part of the loaded class definitions.

    Inherited properties can only be materialized for superclasses that were discovered
    as classes themselves.
    """

    uri: Any
    """
    The class whose superclass could not be found.
    """

    superclass: Any
    """
    The superclass URI that is missing from the class definitions.
    """

    def __post_init__(self):
        KeyError.__init__(
            self,
            f"Superclass {self.superclass} of {self.uri} is not a loaded class definition.",
        )

    def __str__(self):
        return self.args[0]


@dataclass
class OntologyLoadError(RuntimeError):
    """
    Raised when an ontology source cannot be parsed into a graph.
    """

    source: str
    """
    The file path or location that failed to load.
    """

    reason: str = ""
    """
    The message of the underlying parser error.
    """

    def __post_init__(self):
        RuntimeError.__init__(
            self, f"Could not load ontology from {self.source}: {self.reason}"
        )
