from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Tuple, Union


class ModelError(ValueError):
    pass


class UnknownVariableError(ModelError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Variable {name!r} is not in the name index")
        self.name = name


class OptKind(Enum):
    MINIMIZE = "Minimize"
    MAXIMIZE = "Maximize"


class CompKind(Enum):
    EQ = "="
    LE = "<="
    GE = ">="


def _coerce_enum(enum_cls, value):
    """Accept an enum member, its value ("<=") or its name ("LE")."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        pass
    if isinstance(value, str) and value.upper() in enum_cls.__members__:
        return enum_cls[value.upper()]
    raise ModelError(f"Invalid {enum_cls.__name__}: {value!r}")


@dataclass(frozen=True)
class Variable:
    """A ``coeff * name`` contribution."""
    name: str
    coeff: float = 1.0


@dataclass(frozen=True)
class ConstantOffset:
    """A constant contribution, never indexed as a decision variable."""
    value: float


Term = Union[Variable, ConstantOffset]


def _freeze_terms(terms: Iterable[Term]) -> Tuple[Term, ...]:
    frozen = tuple(terms)
    for term in frozen:
        if not isinstance(term, (Variable, ConstantOffset)):
            raise ModelError(f"Expected Variable or ConstantOffset, got {term!r}")
    return frozen


@dataclass(frozen=True)
class Objective:
    terms: Tuple[Term, ...]
    opt_kind: OptKind = OptKind.MINIMIZE

    def __post_init__(self):
        # frozen: assign through object.__setattr__
        object.__setattr__(self, 'terms', _freeze_terms(self.terms))
        object.__setattr__(self, 'opt_kind', _coerce_enum(OptKind, self.opt_kind))


@dataclass(frozen=True)
class Constraint:
    """``sum(left) comp sum(right)``; either side may mix variables and constants."""
    left: Tuple[Term, ...]
    comp: CompKind
    right: Tuple[Term, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'left', _freeze_terms(self.left))
        object.__setattr__(self, 'comp', _coerce_enum(CompKind, self.comp))
        object.__setattr__(self, 'right', _freeze_terms(self.right))


@dataclass(frozen=True)
class LP:
    """
    Symbolic linear program.

    Attributes:
        objective: objective terms and optimization direction
        constraints: constraints in the order they were authored
    """
    objective: Objective
    constraints: Tuple[Constraint, ...] = ()

    def __post_init__(self):
        if not isinstance(self.objective, Objective):
            raise ModelError(f"Expected Objective, got {self.objective!r}")
        constraints = tuple(self.constraints)
        for con in constraints:
            if not isinstance(con, Constraint):
                raise ModelError(f"Expected Constraint, got {con!r}")
        object.__setattr__(self, 'constraints', constraints)

    def solve(self, method: str | None = None, tolerance: float | None = None) -> "Result":
        from .solvers import DEFAULT_METHOD, DEFAULT_TOLERANCE, solve
        return solve(
            self,
            method=method or DEFAULT_METHOD,
            tolerance=DEFAULT_TOLERANCE if tolerance is None else tolerance,
        )

    def __repr__(self) -> str:
        return (f"LP({self.objective.opt_kind.value}, terms={len(self.objective.terms)}, "
                f"constraints={len(self.constraints)})")


@dataclass
class Result:
    """
    Optimal objective value and variable bindings.

    Attributes:
        value: objective value including the objective's constant offset
        var_map: variable name -> optimal value
    """
    value: float
    var_map: Dict[str, float] = field(default_factory=dict)

    def ordered(self) -> List[Tuple[str, float]]:
        """Bindings sorted by variable name."""
        return sorted(self.var_map.items())

    def __repr__(self) -> str:
        return f"Result(value={self.value:.6g}, vars={len(self.var_map)})"
