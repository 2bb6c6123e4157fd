"""Command-line interface for generating Java sources from an ontology."""

import argparse
import logging
from pathlib import Path

from . import handler
from .generator import GenerationOptions, OwlToJavaGenerator
from .repository import SchemaRepository


def _package_override(value: str):
    namespace, sep, package = value.rpartition("=")
    if not sep or not namespace or not package:
        raise argparse.ArgumentTypeError(
            f"expected NAMESPACE=PACKAGE, got {value!r}"
        )
    return namespace, package


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="owl2java",
        description="Generate Java interfaces and implementations from an ontology schema.",
    )
    parser.add_argument(
        "sources",
        nargs="+",
        help="Ontology files to load, or the SPARQL endpoint URL with --endpoint",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        required=True,
        help="Source root to write the Java files to",
    )
    parser.add_argument(
        "--endpoint",
        action="store_true",
        help="Treat the source as a SPARQL query endpoint",
    )
    parser.add_argument(
        "--delegate",
        action="store_true",
        help="Delegate to superclass instances instead of flattening superclass properties",
    )
    parser.add_argument(
        "--annotations",
        action="store_true",
        help="Mark fields with their predicate annotation",
    )
    parser.add_argument(
        "--separate-impl",
        action="store_true",
        help="Put implementation classes into an 'impl' sub-package",
    )
    parser.add_argument("--base-package", help="Package to prefix all packages with")
    parser.add_argument(
        "--package",
        dest="packages",
        type=_package_override,
        action="append",
        default=[],
        metavar="NAMESPACE=PACKAGE",
        help="Use PACKAGE for classes in NAMESPACE (repeatable)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every written file"
    )
    return parser


def main(argv=None) -> int:
    """Run the generator from the command line."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        handler.setLevel(logging.DEBUG)

    if args.endpoint:
        if len(args.sources) != 1:
            parser.error("--endpoint takes exactly one endpoint URL")
        repository = SchemaRepository.from_endpoint(args.sources[0])
    else:
        repository = SchemaRepository.from_files(args.sources)

    options = GenerationOptions(
        flatten_class_structure=not args.delegate,
        generate_annotations=args.annotations,
        separate_implementations=args.separate_impl,
        base_package=args.base_package,
        package_overrides=dict(args.packages),
    )
    generator = OwlToJavaGenerator(repository, options)
    generator.write(str(args.output))
    return 0
