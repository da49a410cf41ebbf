from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.go_package import GoPackageBuilder

SAMPLE_FUNCS = """
package math

// Sqrt returns the square root of x.
func Sqrt(x float64) float64 {
	return sqrt(x)
}

func sqrt(x float64) float64 { return x }

// Pow returns x**y.
func Pow(x, y float64) float64 { return x }

func Frexp(f float64) (frac float64, exp int) { return f, 0 }

func Sincos(x float64) (sin, cos float64) { return x, x }

func NaN() float64 { return 0 }

func Inf(sign int) float64 { return 0 }

func Max(x, y float64) float64 { return x }

type unit struct{}

func (unit) Scale(x float64) float64 { return x }
"""

SAMPLE_CONSTS = """
package math

// Mathematical constants.
const (
	E  = 2.71828182845904523536028747135266249775724709369995957496696763 // https://oeis.org/A001113
	Pi = 3.14159265358979323846264338327950288419716939937510582097494459

	uvnan = 0x7FF8000000000001
)

var (
	Epsilon = 1e-9
	scratch = 0
)
"""


@pytest.fixture
def go_package(tmp_path: Path) -> GoPackageBuilder:
    """Provide a fake math package rooted under the pytest tmp_path."""
    builder = GoPackageBuilder(tmp_path)
    builder.write({"funcs.go": SAMPLE_FUNCS, "const.go": SAMPLE_CONSTS})
    return builder
