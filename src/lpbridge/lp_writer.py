"""
Writer for the plain-text LP model format.

    Minimize
    	5 a + 3 c

    Subject To
    1 b >= 3
    1 b + 1 c = 10

Terms on a line are sorted by variable name. The objective constant has no
slot in the format and is dropped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, TextIO
import io
import logging

from .condense import condense_constraint, condense_terms
from .indexing import index_variables
from .modeling import LP, CompKind, Constraint

logger = logging.getLogger(__name__)

NUMBER_FORMAT = ".16g"

_COMP_TOKENS = {
    CompKind.GE: " >= ",
    CompKind.LE: " <= ",
    CompKind.EQ: " = ",
}


def format_number(value: float) -> str:
    return format(value, NUMBER_FORMAT)


def format_terms(coeffs: Dict[str, float]) -> str:
    """Join non-zero ``<value> <name>`` pairs with `` + ``."""
    return " + ".join(
        f"{format_number(value)} {name}"
        for name, value in sorted(coeffs.items())
        if value != 0
    )


def format_objective(lp: LP, name_map: Dict[str, int]) -> str:
    coeffs, offset = condense_terms(lp.objective.terms, name_map)
    if offset != 0:
        logger.warning(f"Objective constant {offset} cannot be written to LP format; omitted")
    return "\t" + format_terms(coeffs) + "\n"


def format_constraint(con: Constraint, name_map: Dict[str, int]) -> str:
    coeffs, rhs = condense_constraint(con, name_map)
    return format_terms(coeffs) + _COMP_TOKENS[con.comp] + format_number(rhs) + "\n"


def write_lp(f: TextIO, lp: LP) -> None:
    """
    Write an LP to a text stream.

    Args:
        f: writable text stream
        lp: symbolic linear program

    Raises:
        UnknownVariableError: the LP is inconsistent
        OSError: the stream failed; output written so far is left as is
    """
    _, name_map = index_variables(lp)

    f.write(lp.objective.opt_kind.value + "\n")
    f.write(format_objective(lp, name_map))
    f.write("\n")
    f.write("Subject To\n")
    for con in lp.constraints:
        f.write(format_constraint(con, name_map))


def format_lp(lp: LP) -> str:
    buf = io.StringIO()
    write_lp(buf, lp)
    return buf.getvalue()


def save_lp(lp: LP, filepath: Path) -> None:
    filepath = Path(filepath)
    with open(filepath, 'w') as f:
        write_lp(f, lp)
    logger.info(f"Wrote {lp!r} to {filepath.name}")
