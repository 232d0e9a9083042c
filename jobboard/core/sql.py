"""
Helpers for building parameterized SQL by hand.

Column names are always double-quoted and values always travel as bound
parameters, never as SQL text.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple

from jobboard.core.errors import InvalidInputError

# A double-quoted identifier or a $N placeholder; quoted text is skipped.
_PLACEHOLDER = re.compile(r'"(?:[^"]|"")*"|\$(\d+)')


@dataclass(frozen=True)
class SqlFragment:
    """SET clause of a partial UPDATE plus its positional values."""
    set_clause: str
    values: List[Any] = field(default_factory=list)


def sql_for_partial_update(payload: Mapping[str, Any], field_name_map: Mapping[str, str]) -> SqlFragment:
    """
    Build the SET clause for an UPDATE touching only the fields in payload.

    Keys found in field_name_map are translated to their column name, other
    keys are used verbatim. Placeholders are numbered from $1 in payload
    order, so the fragment can follow "UPDATE <table> SET " directly.

        >>> sql_for_partial_update({"numEmployees": 5, "name": "Acme"},
        ...                        {"numEmployees": "num_employees"})
        SqlFragment(set_clause='"num_employees"=$1, "name"=$2', values=[5, 'Acme'])

    Raises:
        InvalidInputError: If payload is empty
    """
    if not payload:
        raise InvalidInputError("No data")

    cols = []
    values = []
    for idx, (key, value) in enumerate(payload.items(), start=1):
        column = field_name_map.get(key, key)
        cols.append(f'"{column}"=${idx}')
        values.append(value)

    return SqlFragment(set_clause=", ".join(cols), values=values)


def bind_positional(sql: str, values: List[Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite $N placeholders into SQLAlchemy named binds.

    "$1" becomes ":p1" and values[0] is returned under "p1". Placeholders
    inside quoted identifiers are left alone.
    """
    def _replace(match):
        if match.group(1) is None:
            return match.group(0)
        return f":p{match.group(1)}"

    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    return _PLACEHOLDER.sub(_replace, sql), params


def like_pattern(term: str) -> str:
    """
    Wrap term for a substring LIKE/ILIKE match, escaping its wildcards.

    Use with escape="\\" so "%" and "_" in term match themselves.
    """
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
