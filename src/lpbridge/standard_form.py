from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple
import logging

import numpy as np

from .condense import condense_terms, normalize_constraint
from .indexing import check_name_index, index_variables, names_from_map
from .modeling import LP, CompKind, Constraint, ModelError, OptKind, UnknownVariableError

logger = logging.getLogger(__name__)


@dataclass
class StandardForm:
    """
    Dense matrix form of an LP, as consumed by minimize-only solvers.

    min  cᵀx
    s.t. G x <= h
         A x  = b

    Attributes:
        c: objective coefficients, negated when the LP maximizes
        G, h: inequality block, every row in ``<=`` direction
        A, b: equality block
        offset: objective constant, not part of c
        maximize: True when c was negated
        names: column -> variable name
        name_map: variable name -> column
    """
    c: np.ndarray
    G: np.ndarray
    h: np.ndarray
    A: np.ndarray
    b: np.ndarray
    offset: float = 0.0
    maximize: bool = False
    names: List[str] = field(default_factory=list)
    name_map: Dict[str, int] = field(default_factory=dict)

    @property
    def num_variables(self) -> int:
        return len(self.names)

    def __repr__(self) -> str:
        return (f"StandardForm(vars={self.num_variables}, eq={self.A.shape[0]}, "
                f"ineq={self.G.shape[0]}, maximize={self.maximize})")


def _scatter(coeffs: Dict[str, float], name_map: Dict[str, int], row: np.ndarray) -> None:
    for name, value in coeffs.items():
        idx = name_map.get(name)
        if idx is None:
            raise UnknownVariableError(name)
        row[idx] += value


def _constraints_to_matrix(
    cons: Sequence[Constraint],
    name_map: Dict[str, int],
    num_vars: int,
) -> Tuple[np.ndarray, np.ndarray]:
    mat = np.zeros((len(cons), num_vars))
    rhs = np.zeros(len(cons))
    for i, con in enumerate(cons):
        row = normalize_constraint(con, name_map)
        _scatter(row.coeffs, name_map, mat[i])
        rhs[i] = row.rhs
    return mat, rhs


def to_standard_form(
    lp: LP,
    names: Optional[List[str]] = None,
    name_map: Optional[Dict[str, int]] = None,
) -> StandardForm:
    """
    Build the dense standard form of an LP.

    Args:
        lp: symbolic linear program
        names: column order; derived from name_map or the LP when omitted
        name_map: variable name -> column; built from the LP when omitted

    Returns:
        StandardForm with equality and inequality blocks in constraint order

    Raises:
        UnknownVariableError: the LP references a variable outside name_map
        ModelError: names and name_map disagree
    """
    if names is None and name_map is None:
        names, name_map = index_variables(lp)
    elif name_map is None:
        name_map = {name: idx for idx, name in enumerate(names)}
        if len(name_map) != len(names):
            raise ModelError(f"names contains duplicates: {names}")
    elif names is None:
        names = names_from_map(name_map)
    else:
        check_name_index(names, name_map)
    num_vars = len(names)

    obj_coeffs, offset = condense_terms(lp.objective.terms, name_map)
    c = np.zeros(num_vars)
    _scatter(obj_coeffs, name_map, c)

    maximize = lp.objective.opt_kind is OptKind.MAXIMIZE
    if maximize:
        # solvers only minimize
        c = -c

    eqs = [con for con in lp.constraints if con.comp is CompKind.EQ]
    ineqs = [con for con in lp.constraints if con.comp is not CompKind.EQ]

    A, b = _constraints_to_matrix(eqs, name_map, num_vars)
    G, h = _constraints_to_matrix(ineqs, name_map, num_vars)

    logger.debug(f"Standard form: {num_vars} variables, {len(eqs)} equalities, "
                 f"{len(ineqs)} inequalities, offset={offset}")

    return StandardForm(
        c=c,
        G=G,
        h=h,
        A=A,
        b=b,
        offset=offset,
        maximize=maximize,
        names=list(names),
        name_map=dict(name_map),
    )
