"""Decide which functions can be wrapped once over a numeric type parameter."""

from __future__ import annotations

from typing import List, Sequence

from .models import FieldDecl, FunctionDecl, FunctionRecord, Parameter


class Classifier:
    """Classifies function declarations as generic wrappers or plain aliases.

    A function is generic when every parameter and its single result are the
    native floating-point type. Types are compared textually: an alias of the
    native type does not qualify.
    """

    def __init__(self, native_type: str = "float64", type_param: str = "N") -> None:
        self.native_type = native_type
        self.type_param = type_param

    def classify(self, decl: FunctionDecl) -> FunctionRecord:
        original: List[Parameter] = []
        generic: List[Parameter] = []
        casts: List[str] = []
        params_ok = True

        for index, field in enumerate(decl.params):
            if not self._is_native(field):
                params_ok = False
            for name in field.names or (f"arg{index}",):
                original.append(Parameter(name, field.type_text))
                generic.append(Parameter(name, self.type_param))
                casts.append(f"{self.native_type}({name})")

        return_ok, return_type = self._check_results(decl.results)
        return FunctionRecord(
            name=decl.name,
            original_params=tuple(original),
            generic_params=tuple(generic),
            cast_expressions=tuple(casts),
            return_type=return_type,
            is_generic=params_ok and return_ok,
            original_signature=decl.signature,
        )

    def classify_all(self, decls: Sequence[FunctionDecl]) -> List[FunctionRecord]:
        return [self.classify(decl) for decl in decls]

    def _check_results(self, results: Sequence[FieldDecl]) -> tuple[bool, str]:
        if len(results) != 1:
            return False, ""
        result = results[0]
        # (a, b float64) is one field but two return values.
        if len(result.names) > 1:
            return False, result.type_text
        return self._is_native(result), result.type_text

    def _is_native(self, field: FieldDecl) -> bool:
        return field.type_name == self.native_type


__all__ = ["Classifier"]
