"""Locate a Go package and collect its exported declarations."""

from __future__ import annotations

from typing import List

from ..logging import get_logger
from ..models import FunctionDecl, ScanResult, TypeDecl, ValueDecl
from .go_source import GoSourceParser, is_exported
from .resolver import GoPackage, PackageResolver


class DeclarationScanner:
    """Resolves a package and parses each of its source files in order.

    The first file that fails to parse aborts the scan; no partial result is
    returned.
    """

    def __init__(
        self,
        resolver: PackageResolver | None = None,
        parser: GoSourceParser | None = None,
    ) -> None:
        self.resolver = resolver or PackageResolver()
        self.parser = parser or GoSourceParser()
        self.logger = get_logger("scanner")

    def scan(self, package: str) -> ScanResult:
        resolved = self.resolver.resolve(package)
        return self.scan_package(resolved)

    def scan_package(self, package: GoPackage) -> ScanResult:
        functions: List[FunctionDecl] = []
        constants: List[ValueDecl] = []
        variables: List[ValueDecl] = []
        types: List[TypeDecl] = []
        for path in package.paths():
            self.logger.debug("Parsing %s", path)
            result = self.parser.parse_file(path)
            functions.extend(result.functions)
            constants.extend(result.constants)
            variables.extend(result.variables)
            types.extend(result.types)

        self.logger.info(
            "Scanned %s: %d functions, %d constants, %d variables, %d types",
            package.import_path,
            len(functions),
            len(constants),
            len(variables),
            len(types),
        )
        return ScanResult(
            functions=tuple(functions),
            constants=tuple(constants),
            variables=tuple(variables),
            types=tuple(types),
        )


__all__ = [
    "DeclarationScanner",
    "GoPackage",
    "GoSourceParser",
    "PackageResolver",
    "is_exported",
]
