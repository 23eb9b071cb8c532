"""
lpbridge

Translate symbolic linear programs into solver standard form and exchange them
with external tools through plain-text formats.

Modules:
    modeling: Terms, constraints, objectives, LP and Result
    indexing: Dense variable numbering
    condense: Term condensation and constraint normalization
    standard_form: Dense ``c, G, h, A, b`` construction
    solvers: Solver backends and the solve orchestrator
    lp_writer: Text LP model writer
    sol_parser: Solution file parser
"""

from .modeling import (
    LP,
    CompKind,
    ConstantOffset,
    Constraint,
    ModelError,
    Objective,
    OptKind,
    Result,
    Term,
    UnknownVariableError,
    Variable,
)

from .indexing import index_variables

from .condense import (
    NormalizedRow,
    condense_constraint,
    condense_terms,
    normalize_constraint,
)

from .standard_form import StandardForm, to_standard_form

from .solvers import (
    DEFAULT_METHOD,
    DEFAULT_TOLERANCE,
    SOLVER_REGISTRY,
    InfeasibleError,
    SolverError,
    UnboundedError,
    solve,
    solve_standard_form,
)

from .lp_writer import format_lp, save_lp, write_lp

from .sol_parser import SolutionFormatError, parse_solution, read_solution

__version__ = "1.0.0"

__all__ = [
    # Modeling
    'LP',
    'CompKind',
    'ConstantOffset',
    'Constraint',
    'ModelError',
    'Objective',
    'OptKind',
    'Result',
    'Term',
    'UnknownVariableError',
    'Variable',
    # Reduction
    'index_variables',
    'NormalizedRow',
    'condense_constraint',
    'condense_terms',
    'normalize_constraint',
    'StandardForm',
    'to_standard_form',
    # Solvers
    'DEFAULT_METHOD',
    'DEFAULT_TOLERANCE',
    'SOLVER_REGISTRY',
    'InfeasibleError',
    'SolverError',
    'UnboundedError',
    'solve',
    'solve_standard_form',
    # Text formats
    'format_lp',
    'save_lp',
    'write_lp',
    'SolutionFormatError',
    'parse_solution',
    'read_solution',
]
