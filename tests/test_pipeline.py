"""End-to-end tests for a full regeneration run."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

import pytest

from genmath.config import GeneratorConfig
from genmath.errors import ParseError, ResolutionError
from genmath.pipeline import Generator
from genmath.scanner import DeclarationScanner, PackageResolver
from tests._fixtures.go_package import GoPackageBuilder

_OUTPUTS = ("core_functions.go", "core_consts.go", "core_vars.go", "core_types.go")


def _generator(go_package: GoPackageBuilder, out: Path) -> Generator:
    return Generator(config=GeneratorConfig(output_dir=out), scanner=go_package.scanner())


def _read_outputs(out: Path) -> dict[str, bytes]:
    return {name: (out / name).read_bytes() for name in _OUTPUTS}


def test_run_classifies_and_writes_all_modules(go_package: GoPackageBuilder, tmp_path: Path) -> None:
    out = tmp_path / "out"
    out.mkdir()

    result = _generator(go_package, out).run()

    generic = {record.name for record in result.model.functions if record.is_generic}
    aliases = {record.name for record in result.model.functions if not record.is_generic}
    assert generic == {"Sqrt", "Pow", "NaN", "Max"}
    assert aliases == {"Frexp", "Sincos", "Inf"}
    assert result.generic_count == 4
    assert [path.name for path in result.written] == list(_OUTPUTS)

    functions = (out / "core_functions.go").read_text(encoding="utf-8")
    assert "func Sqrt[N Number](x N) N {\n\treturn N(math.Sqrt(float64(x)))\n}" in functions
    assert "func NaN[N Number]() N {\n\treturn N(math.NaN())\n}" in functions
    assert "var Frexp = math.Frexp\n" in functions
    assert "var Sincos = math.Sincos\n" in functions
    assert "Scale" not in functions
    assert "sqrt" not in functions.replace("Sqrt", "")

    consts = (out / "core_consts.go").read_text(encoding="utf-8")
    assert "\tE = math.E\n\tPi = math.Pi\n)" in consts
    assert "uvnan" not in consts

    variables = (out / "core_vars.go").read_text(encoding="utf-8")
    assert "\tEpsilon = math.Epsilon\n" in variables
    assert "scratch" not in variables


def test_regeneration_is_byte_identical(go_package: GoPackageBuilder, tmp_path: Path) -> None:
    out = tmp_path / "out"
    out.mkdir()

    _generator(go_package, out).run()
    first = _read_outputs(out)
    _generator(go_package, out).run()

    assert _read_outputs(out) == first


def test_removed_function_disappears_from_output(go_package: GoPackageBuilder, tmp_path: Path) -> None:
    out = tmp_path / "out"
    out.mkdir()
    go_package.write({"max.go": "package math\n\nfunc Min(x, y float64) float64 { return x }\n"})
    _generator(go_package, out).run()
    before = (out / "core_functions.go").read_text(encoding="utf-8")

    go_package.remove("max.go")
    _generator(go_package, out).run()
    after = (out / "core_functions.go").read_text(encoding="utf-8")

    block = (
        "\n// Min wraps math.Min in a generic function.\n"
        "func Min[N Number](x, y N) N {\n"
        "\treturn N(math.Min(float64(x), float64(y)))\n"
        "}\n"
    )
    assert block in before
    assert after == before.replace(block, "")


def test_types_module_lists_exported_types(go_package: GoPackageBuilder, tmp_path: Path) -> None:
    out = tmp_path / "out"
    out.mkdir()
    go_package.write({"types.go": "package math\n\n// Grid of values.\ntype Grid [][]float64\n"})

    _generator(go_package, out).run()

    types = (out / "core_types.go").read_text(encoding="utf-8")
    assert "\n// Grid of values.\ntype Grid [][]float64\n" in types


def test_resolution_failure_writes_nothing(tmp_path: Path) -> None:
    def runner(args):  # type: ignore[no-untyped-def]
        raise subprocess.CalledProcessError(1, list(args), stderr="cannot find package\n")

    scanner = DeclarationScanner(resolver=PackageResolver(runner=runner))
    generator = Generator(config=GeneratorConfig(output_dir=tmp_path), scanner=scanner)

    with pytest.raises(ResolutionError):
        generator.run()
    assert list(tmp_path.iterdir()) == []


def test_parse_failure_writes_nothing(go_package: GoPackageBuilder, tmp_path: Path) -> None:
    out = tmp_path / "out"
    out.mkdir()
    go_package.write({"zz_broken.go": "package math\n\nconst (\n"})

    with pytest.raises(ParseError, match="zz_broken.go"):
        _generator(go_package, out).run()
    assert list(out.iterdir()) == []


def test_debug_log_names_each_declaration_location(
    go_package: GoPackageBuilder,
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(logging.getLogger("genmath"), "propagate", True)

    with caplog.at_level(logging.DEBUG, logger="genmath"):
        _generator(go_package, tmp_path).build()

    assert "funcs.go:4: Sqrt func(x float64) float64 -> generic" in caplog.text
    assert "Frexp func(f float64) (frac float64, exp int) -> alias" in caplog.text
