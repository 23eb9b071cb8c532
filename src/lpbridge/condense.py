"""
Term condensation and constraint normalization.

Rows are kept sparse as ``{name: coefficient}`` dicts; a missing key means a
zero coefficient.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from .modeling import CompKind, Constraint, ConstantOffset, Term, UnknownVariableError


@dataclass
class NormalizedRow:
    """``coeffs · x == rhs`` when is_equality, else ``coeffs · x <= rhs``."""
    coeffs: Dict[str, float]
    rhs: float
    is_equality: bool


def condense_terms(
    terms: Iterable[Term],
    name_map: Optional[Dict[str, int]] = None,
) -> Tuple[Dict[str, float], float]:
    """
    Merge terms into per-variable coefficients plus a constant, i.e. ``w·x + con``.

    Args:
        terms: variable and constant terms, repeats allowed
        name_map: when given, every variable must be present in it

    Returns:
        Tuple of (coeffs, constant)

    Raises:
        UnknownVariableError: a variable is missing from name_map
    """
    coeffs: Dict[str, float] = {}
    constant = 0.0
    for term in terms:
        if isinstance(term, ConstantOffset):
            constant += term.value
            continue
        if name_map is not None and term.name not in name_map:
            raise UnknownVariableError(term.name)
        coeffs[term.name] = coeffs.get(term.name, 0.0) + term.coeff
    return coeffs, constant


def condense_constraint(
    con: Constraint,
    name_map: Optional[Dict[str, int]] = None,
) -> Tuple[Dict[str, float], float]:
    """Rewrite ``L op R`` as ``w·x op con``; the comparator is left unchanged."""
    coeffs, const_left = condense_terms(con.left, name_map)
    right, const_right = condense_terms(con.right, name_map)
    for name, value in right.items():
        coeffs[name] = coeffs.get(name, 0.0) - value
    return coeffs, const_right - const_left


def normalize_constraint(
    con: Constraint,
    name_map: Optional[Dict[str, int]] = None,
) -> NormalizedRow:
    """
    Reduce a constraint to an equality row or a ``<=`` row.

    ``>=`` constraints are multiplied by -1 so that every inequality can be
    stacked into a single ``G x <= h`` block.
    """
    coeffs, rhs = condense_constraint(con, name_map)
    if con.comp is CompKind.GE:
        coeffs = {name: -value for name, value in coeffs.items()}
        rhs = -rhs
    return NormalizedRow(coeffs=coeffs, rhs=rhs, is_equality=con.comp is CompKind.EQ)
