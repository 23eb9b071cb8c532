"""
Parser for line-based solution files.

Format: one ``name value`` pair per line, whitespace separated. Blank lines
and lines starting with ``#`` are skipped.
"""

from pathlib import Path
from typing import Dict, Iterable
import logging

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


class SolutionFormatError(ValueError):
    def __init__(self, line_num: int, line: str, reason: str) -> None:
        super().__init__(f"Line {line_num}: {reason}: {line!r}")
        self.line_num = line_num
        self.line = line


def parse_solution(lines: Iterable[str]) -> Dict[str, float]:
    """
    Parse solution lines into variable bindings.

    Args:
        lines: text lines, e.g. an open file or io.StringIO

    Returns:
        {name: value}; a repeated name keeps its last value

    Raises:
        SolutionFormatError: a line does not hold exactly ``name value``
    """
    solution: Dict[str, float] = {}
    for line_num, line in enumerate(lines, 1):
        line = line.strip()

        if not line or line.startswith(COMMENT_PREFIX):
            continue

        parts = line.split()
        if len(parts) != 2:
            raise SolutionFormatError(line_num, line, f"expected 2 fields, got {len(parts)}")

        name, raw_value = parts
        # float() accepts digit separators, the format does not
        if "_" in raw_value:
            raise SolutionFormatError(line_num, line, "bad float")
        try:
            value = float(raw_value)
        except ValueError:
            raise SolutionFormatError(line_num, line, "bad float") from None
        solution[name] = value

    return solution


def read_solution(filepath: Path) -> Dict[str, float]:
    """
    Read a solution file.

    Raises:
        FileNotFoundError: file does not exist
        SolutionFormatError: file format is invalid
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Solution file not found: {filepath}")

    with open(filepath, 'r') as f:
        solution = parse_solution(f)

    logger.info(f"Parsed {len(solution)} values from {filepath.name}")
    return solution
