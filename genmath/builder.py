"""Assemble scanned and classified declarations into the emitter's model."""

from __future__ import annotations

from typing import Iterable

from .models import (
    ConstantRecord,
    DeclarationModel,
    FunctionRecord,
    ScanResult,
    TypeRecord,
    VariableRecord,
)


def build_model(functions: Iterable[FunctionRecord], scan: ScanResult) -> DeclarationModel:
    """Group records into the four ordered collections, preserving scan order."""
    return DeclarationModel(
        functions=tuple(functions),
        constants=tuple(ConstantRecord(decl.name, decl.value) for decl in scan.constants),
        variables=tuple(VariableRecord(decl.name, decl.value) for decl in scan.variables),
        types=tuple(TypeRecord(decl.name, decl.declaration) for decl in scan.types),
    )


__all__ = ["build_model"]
