"""Declaration model shared by the scanner, classifier, builder and emitter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class SourceLocation:
    """Position of a declaration inside the scanned package."""

    path: str
    line: int

    def __str__(self) -> str:
        return f"{self.path}:{self.line}"


@dataclass(frozen=True)
class FieldDecl:
    """A parameter or result field: zero or more names sharing one type node."""

    names: Tuple[str, ...]
    type_text: str
    # Identifier of the type when the expression is a bare identifier.
    type_name: Optional[str] = None


@dataclass(frozen=True)
class FunctionDecl:
    """Exported free function as declared in source."""

    name: str
    params: Tuple[FieldDecl, ...]
    results: Tuple[FieldDecl, ...]
    signature: str
    location: SourceLocation


@dataclass(frozen=True)
class ValueDecl:
    """Exported constant or variable name with its positional initializer."""

    name: str
    value: str
    location: SourceLocation


@dataclass(frozen=True)
class TypeDecl:
    """Exported type spec with its rendered declaration text."""

    name: str
    declaration: str
    location: SourceLocation


@dataclass(frozen=True)
class ScanResult:
    """Raw declarations of one package, in file and declaration order."""

    functions: Tuple[FunctionDecl, ...] = ()
    constants: Tuple[ValueDecl, ...] = ()
    variables: Tuple[ValueDecl, ...] = ()
    types: Tuple[TypeDecl, ...] = ()


@dataclass(frozen=True)
class Parameter:
    name: str
    type: str

    def render(self) -> str:
        return f"{self.name} {self.type}"


def _join_params(params: Tuple[Parameter, ...]) -> str:
    # Consecutive names sharing a type collapse into one "a, b T" group.
    groups: list[list[Parameter]] = []
    for param in params:
        if groups and groups[-1][-1].type == param.type:
            groups[-1].append(param)
        else:
            groups.append([param])
    rendered = []
    for group in groups:
        if len(group) == 1:
            rendered.append(group[0].render())
        else:
            rendered.append(f"{', '.join(p.name for p in group)} {group[0].type}")
    return ", ".join(rendered)


@dataclass(frozen=True)
class FunctionRecord:
    """Classified function ready for template substitution."""

    name: str
    original_params: Tuple[Parameter, ...]
    generic_params: Tuple[Parameter, ...]
    cast_expressions: Tuple[str, ...]
    return_type: str
    is_generic: bool
    original_signature: str

    @property
    def params_text(self) -> str:
        return _join_params(self.original_params)

    @property
    def generic_params_text(self) -> str:
        return _join_params(self.generic_params)

    @property
    def cast_args_text(self) -> str:
        return ", ".join(self.cast_expressions)


@dataclass(frozen=True)
class ConstantRecord:
    name: str
    value_expression: str


@dataclass(frozen=True)
class VariableRecord:
    name: str
    value_expression: str


@dataclass(frozen=True)
class TypeRecord:
    name: str
    declaration_text: str


@dataclass(frozen=True)
class DeclarationModel:
    """The four ordered collections rendered by the emitter."""

    functions: Tuple[FunctionRecord, ...] = ()
    constants: Tuple[ConstantRecord, ...] = ()
    variables: Tuple[VariableRecord, ...] = ()
    types: Tuple[TypeRecord, ...] = ()


@dataclass(frozen=True)
class OutputModule:
    """A generated file: where it goes, how it is rendered, and from what."""

    name: str
    filename: str
    template: str
    collection: str


__all__ = [
    "ConstantRecord",
    "DeclarationModel",
    "FieldDecl",
    "FunctionDecl",
    "FunctionRecord",
    "OutputModule",
    "Parameter",
    "ScanResult",
    "SourceLocation",
    "TypeDecl",
    "TypeRecord",
    "ValueDecl",
    "VariableRecord",
]
