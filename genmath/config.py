"""Fixed generation settings for genmath.

Every value here is a literal: the generator reads no configuration file and
no environment variables. Tests build their own ``GeneratorConfig`` to point
the output at a temporary directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

GENERATED_MARKER = "// Code generated by go:generate; DO NOT EDIT."


@dataclass(frozen=True)
class GeneratorConfig:
    """Literals shared by the scanner, classifier and emitter."""

    package: str = "math"
    output_package: str = "math"
    native_type: str = "float64"
    type_param: str = "N"
    constraint: str = "Number"
    anchor: str = "Pi"
    output_dir: Path = field(default_factory=Path.cwd)
    functions_file: str = "core_functions.go"
    constants_file: str = "core_consts.go"
    variables_file: str = "core_vars.go"
    types_file: str = "core_types.go"

    @property
    def qualifier(self) -> str:
        """Identifier used to reference the target package in generated code."""
        return self.package.rsplit("/", 1)[-1]

    @property
    def header(self) -> str:
        return f"{GENERATED_MARKER}\n\npackage {self.output_package}\n"


__all__ = ["GENERATED_MARKER", "GeneratorConfig"]
