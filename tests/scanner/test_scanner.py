"""Tests for the package-level declaration scanner."""

from __future__ import annotations

import pytest

from genmath.errors import ParseError
from tests._fixtures.go_package import GoPackageBuilder


def test_scanner_aggregates_files_in_go_list_order(go_package: GoPackageBuilder) -> None:
    result = go_package.scanner().scan("math")

    assert go_package.calls == [["go", "list", "-json", "math"]]
    assert [fn.name for fn in result.functions] == [
        "Sqrt",
        "Pow",
        "Frexp",
        "Sincos",
        "NaN",
        "Inf",
        "Max",
    ]
    assert [c.name for c in result.constants] == ["E", "Pi"]
    assert [v.name for v in result.variables] == ["Epsilon"]
    assert result.types == ()
    assert result.functions[0].location.path.endswith("funcs.go")


def test_scanner_ignores_test_files(go_package: GoPackageBuilder) -> None:
    go_package.write({"sqrt_test.go": "package math\n\nfunc TestSqrt() {}\n"})

    result = go_package.scanner().scan("math")

    assert "TestSqrt" not in {fn.name for fn in result.functions}


def test_scanner_aborts_on_first_parse_failure(go_package: GoPackageBuilder) -> None:
    go_package.write({"broken.go": "package math\n\nfunc Broken(\n"})

    with pytest.raises(ParseError, match="broken.go"):
        go_package.scanner().scan("math")
