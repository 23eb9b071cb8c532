from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from .modeling import LP, ModelError, Term, Variable


def _iter_terms(lp: LP) -> Iterable[Term]:
    yield from lp.objective.terms
    for con in lp.constraints:
        yield from con.left
        yield from con.right


def index_variables(lp: LP) -> Tuple[List[str], Dict[str, int]]:
    """
    Assign a dense index to every variable of the LP.

    Variables are numbered in first-seen order: objective terms, then each
    constraint's left terms followed by its right terms. This order fixes the
    column order of every matrix built from the LP.

    Args:
        lp: symbolic linear program

    Returns:
        Tuple of (names, name_map):
        - names: variable names, position == index
        - name_map: {name: index}
    """
    names: List[str] = []
    name_map: Dict[str, int] = {}
    for term in _iter_terms(lp):
        if not isinstance(term, Variable):
            continue
        if term.name not in name_map:
            name_map[term.name] = len(names)
            names.append(term.name)
    return names, name_map


def names_from_map(name_map: Dict[str, int]) -> List[str]:
    """Invert a dense ``{name: index}`` map into the column-ordered name list."""
    names: List[Optional[str]] = [None] * len(name_map)
    for name, idx in name_map.items():
        if not 0 <= idx < len(names) or names[idx] is not None:
            raise ModelError(f"name_map is not a dense index: {name!r} -> {idx}")
        names[idx] = name
    return names


def check_name_index(names: List[str], name_map: Dict[str, int]) -> None:
    """
    Verify that names and name_map describe the same column order.

    Raises:
        ModelError: sizes differ or ``name_map[names[i]] != i`` for some i
    """
    if len(names) != len(name_map):
        raise ModelError(f"names has {len(names)} entries, name_map has {len(name_map)}")
    for idx, name in enumerate(names):
        if name_map.get(name) != idx:
            raise ModelError(f"name_map disagrees with names at column {idx}: {name!r}")
