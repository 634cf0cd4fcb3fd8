from __future__ import annotations

from typing import Sequence

import sympy as sp

# Coefficient precision of the plain-text equation; downstream output
# (point files, console) is compared against this exact layout.
EQUATION_DECIMALS: int = 2


def format_polynomial(coefficients: Sequence[float]) -> str:
    """Render highest-power-first coefficients as ``"y = ..."``.

    Zero coefficients are dropped entirely; ``"+ "`` precedes a positive
    term only when something was already written; negatives keep their
    own sign. An all-zero polynomial reads ``"y = 0"``.
    """
    degree = len(coefficients) - 1
    parts: list[str] = ["y = "]
    emitted = False

    for i, raw in enumerate(coefficients):
        c = float(raw)
        if c == 0:
            continue
        power = degree - i
        if c > 0 and emitted:
            parts.append("+ ")
        parts.append(f"{c:.{EQUATION_DECIMALS}f}")
        if power >= 2:
            parts.append(f"x^{power} ")
        elif power == 1:
            parts.append("x ")
        emitted = True

    if not emitted:
        parts.append("0")
    return "".join(parts)


# ===========================================================================
# LaTeX generator
# ===========================================================================

class LaTeXGenerator:
    """Converts polynomial coefficients -> display-math LaTeX string.

    Parameters
    ----------
    approx : bool
        When True (default) coefficients are rendered as rounded decimals
        with *decimals* digits after the point. When False, exact
        rational fractions are used.
    decimals : int
        Number of digits after the decimal point in approximate mode.
    """

    def __init__(self, approx: bool = True, decimals: int = 3) -> None:
        self.approx = approx
        self.decimals = max(0, min(10, int(decimals)))
        self._x = sp.Symbol("x")

    def generate(self, coefficients: Sequence[float]) -> str:
        degree = len(coefficients) - 1
        expr: sp.Expr = sp.Integer(0)
        for i, c in enumerate(coefficients):
            if float(c) == 0:
                continue
            expr += self._n(float(c)) * self._x ** (degree - i)
        return self._wrap(expr)

    def _n(self, v: float) -> sp.Expr:
        """Float rounded to self.decimals, or a fraction with denominator <= 1000."""
        if self.approx:
            return sp.Float(f"{v:.{self.decimals}f}")
        return sp.Rational(v).limit_denominator(1000)

    def _round_floats(self, expr: sp.Basic) -> sp.Basic:
        if isinstance(expr, sp.Float):
            return sp.Float(f"{float(expr):.{self.decimals}f}")
        if expr.args:
            return expr.func(*[self._round_floats(a) for a in expr.args])
        return expr

    def _wrap(self, expr: sp.Basic) -> str:
        if self.approx:
            return f"$$y = {sp.latex(self._round_floats(expr))}$$"
        return f"$$y = {sp.latex(sp.nsimplify(expr))}$$"
