"""
Solver backends and the solve orchestrator.

Every backend follows the same contract::

    backend(c, G, h, A, b, tolerance) -> (objective_value, x)

and solves ``min cᵀx s.t. Gx <= h, Ax = b, x >= 0``. Failures are raised as
SolverError subclasses and are never retried here.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple
import logging
import warnings

import numpy as np
from scipy.optimize import linprog

from .modeling import LP, Result
from .standard_form import StandardForm, to_standard_form

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-6
DEFAULT_METHOD = "highs"


class SolverError(Exception):
    pass


class InfeasibleError(SolverError):
    pass


class UnboundedError(SolverError):
    pass


def _check_empty_problem(G: np.ndarray, h: np.ndarray, A: np.ndarray, b: np.ndarray,
                         tolerance: float) -> Tuple[float, np.ndarray]:
    # no columns: every row reads 0 <= h or 0 == b
    if np.any(h < -tolerance) or np.any(np.abs(b) > tolerance):
        raise InfeasibleError("Problem without variables has unsatisfiable constant constraints")
    return 0.0, np.zeros(0)


def highs_solve(
    c: np.ndarray,
    G: np.ndarray,
    h: np.ndarray,
    A: np.ndarray,
    b: np.ndarray,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Tuple[float, np.ndarray]:
    """Solve with scipy's HiGHS interface."""
    if len(c) == 0:
        return _check_empty_problem(G, h, A, b, tolerance)

    A_ub, b_ub = (G, h) if G.shape[0] > 0 else (None, None)
    A_eq, b_eq = (A, b) if A.shape[0] > 0 else (None, None)
    options = {
        "disp": False,
        "primal_feasibility_tolerance": tolerance,
        "dual_feasibility_tolerance": tolerance,
    }

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        res = linprog(c, A_ub=A_ub, b_ub=b_ub, A_eq=A_eq, b_eq=b_eq,
                      bounds=(0, None), method="highs", options=options)

    # linprog status: 0 optimal, 1 iteration limit, 2 infeasible, 3 unbounded, 4 numerical
    if res.status == 2:
        raise InfeasibleError(res.message)
    if res.status == 3:
        raise UnboundedError(res.message)
    if res.status != 0:
        raise SolverError(f"linprog failed (status {res.status}): {res.message}")

    logger.debug(f"HiGHS: fun={res.fun}, nit={getattr(res, 'nit', None)}")
    return float(res.fun), np.asarray(res.x, dtype=float)


def gurobi_solve(
    c: np.ndarray,
    G: np.ndarray,
    h: np.ndarray,
    A: np.ndarray,
    b: np.ndarray,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Tuple[float, np.ndarray]:
    """Solve with gurobipy's matrix API (requires the ``gurobi`` extra)."""
    import gurobipy as gp
    from gurobipy import GRB

    if len(c) == 0:
        return _check_empty_problem(G, h, A, b, tolerance)

    with gp.Env(empty=True) as env:
        env.setParam('OutputFlag', 0)
        env.start()
        with gp.Model("lpbridge", env=env) as model:
            # Gurobi accepts tolerances in [1e-9, 1e-2]
            tol = min(max(tolerance, 1e-9), 1e-2)
            model.setParam('FeasibilityTol', tol)
            model.setParam('OptimalityTol', tol)

            x = model.addMVar(len(c), lb=0.0, name="x")
            model.setObjective(c @ x, GRB.MINIMIZE)
            if G.shape[0] > 0:
                model.addConstr(G @ x <= h, name="ineq")
            if A.shape[0] > 0:
                model.addConstr(A @ x == b, name="eq")
            model.optimize()

            status = model.Status
            if status == GRB.INF_OR_UNBD:
                # presolve could not tell which; re-solve without dual reductions
                logger.debug("Gurobi: INF_OR_UNBD, re-solving with DualReductions=0")
                model.setParam('DualReductions', 0)
                model.reset()
                model.optimize()
                status = model.Status

            if status == GRB.INFEASIBLE:
                raise InfeasibleError("Gurobi: model is infeasible")
            if status == GRB.UNBOUNDED:
                raise UnboundedError("Gurobi: model is unbounded")
            if status == GRB.INF_OR_UNBD:
                raise SolverError("Gurobi: model is infeasible or unbounded")
            if status != GRB.OPTIMAL:
                raise SolverError(f"Gurobi failed with status {status}")

            logger.debug(f"Gurobi: obj={model.ObjVal}, iters={model.IterCount}")
            return float(model.ObjVal), np.asarray(x.X, dtype=float)


SolverFn = Callable[..., Tuple[float, np.ndarray]]

SOLVER_REGISTRY: Dict[str, SolverFn] = {
    "highs": highs_solve,
    "gurobi": gurobi_solve,
}


def solve_standard_form(
    form: StandardForm,
    method: str = DEFAULT_METHOD,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Tuple[float, np.ndarray]:
    """
    Run a backend on a standard form and map the objective back.

    Returns:
        (value, x) where value is in the LP's own direction and includes the offset
    """
    if method not in SOLVER_REGISTRY:
        raise SolverError(f"Unknown solver method: {method}")
    solver = SOLVER_REGISTRY[method]

    logger.debug(f"Calling {method} on {form!r}")
    obj, x = solver(form.c, form.G, form.h, form.A, form.b, tolerance)

    if form.maximize:
        obj = -obj
    return obj + form.offset, x


def solve(
    lp: LP,
    method: str = DEFAULT_METHOD,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Result:
    """
    Solve a symbolic LP.

    Args:
        lp: symbolic linear program
        method: key of SOLVER_REGISTRY
        tolerance: feasibility/optimality tolerance handed to the backend

    Returns:
        Result with the objective value and per-variable optimum

    Raises:
        UnknownVariableError: the LP is inconsistent
        SolverError: unknown method or backend failure (InfeasibleError, UnboundedError)
    """
    form = to_standard_form(lp)
    value, x = solve_standard_form(form, method=method, tolerance=tolerance)

    var_map: Dict[str, float] = {}
    for idx, name in enumerate(form.names):
        var_map[name] = float(x[idx])

    logger.info(f"Solved {lp!r} with {method}: value={value:.6g}")
    return Result(value=float(value), var_map=var_map)