"""Literal extraction from check constraint definitions."""

from __future__ import annotations

import json
import re

# Content inside single quotes, e.g. 'Active' in ([Status]='Active')
QUOTED_LITERAL = re.compile(r"'([^']+)'")

UNION_SEPARATOR = " | "


def quote_literal(value: str) -> str:
    """Quote a value as a TypeScript string literal."""
    return json.dumps(value, ensure_ascii=False)


def extract_literals(definition: str | None) -> tuple[str, ...] | None:
    """Collect the quoted literals of a check constraint definition.

    This is a best-effort scan over the text, not a SQL expression parser:
    every single-quoted substring counts as a literal, whatever operator
    surrounds it.

    Args:
        definition: Raw constraint expression, e.g.
            ``([Status]='Active' OR [Status]='Inactive')``

    Returns:
        Quoted, deduplicated literals sorted lexicographically, or None when the
        definition contains no quoted literal (e.g. ``([value]>(0))``)
    """
    if not definition:
        return None
    values = sorted(set(QUOTED_LITERAL.findall(definition)))
    if not values:
        return None
    return tuple(quote_literal(value) for value in values)


def literal_union(literals: tuple[str, ...]) -> str:
    """Join quoted literals into a union type expression such as ``"A" | "B"``."""
    return UNION_SEPARATOR.join(literals)
