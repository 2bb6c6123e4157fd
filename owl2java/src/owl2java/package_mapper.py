from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from rdflib import URIRef
from typing_extensions import Dict, Iterable, List, Optional

from .utils import java_identifier, namespace_of


@dataclass
class PackageMapper:
    """
    Assigns a Java package to every class based on the namespace of its URI.

    A namespace like ``http://www.example.org/zoo#`` becomes the package ``org.example.zoo``:
    the host name is reversed without a leading ``www`` and the path segments follow it.
    """

    base_package: Optional[str] = None
    """
    A package that all generated packages are placed in.
    """

    overrides: Dict[str, str] = field(default_factory=dict)
    """
    Explicit packages for namespaces, keyed by the namespace URI.
    """

    def namespace_for(self, uri: URIRef) -> str:
        """
        The Java package for a class URI.

        :param uri: The class URI.
        :return: The dot separated package name.
        """
        namespace = namespace_of(uri)
        if namespace in self.overrides:
            return self.overrides[namespace]
        parts = self._package_parts(namespace)
        if self.base_package:
            parts = self.base_package.split(".") + parts
        return ".".join(parts) or "ontology"

    def package_map(self, uris: Iterable[URIRef]) -> Dict[URIRef, str]:
        """
        Build the package map for a set of classes.

        :param uris: The URIs of all classes of a generation run, superclasses included.
        :return: The Java package of every class.
        """
        return {uri: self.namespace_for(uri) for uri in uris}

    @staticmethod
    def _package_parts(namespace: str) -> List[str]:
        split = urlsplit(namespace)
        host = [p for p in (split.hostname or "").split(".") if p]
        if host and host[0] == "www":
            host = host[1:]
        segments = [s for s in re.split(r"[/#]", split.path) if s]
        if not split.hostname:
            # urn:example:zoo and similar
            segments = [s for s in re.split(r"[:/#]", split.path) if s]
        return [
            java_identifier(part.lower())
            for part in list(reversed(host)) + segments
        ]
