"""
Parser and renderer for named-import clauses.

    "isEqual, isFunction as fn"  →  [NamedImport("isEqual"), NamedImport("isFunction", "fn")]

Kept separate from the matchers so rename handling is a single unit.
"""

import re
from typing import List, Optional

from lodash_swap.model import NamedImport

_NAMED_IMPORT_RE = re.compile(r"^(\w+)(?:\s+as\s+(\w+))?$")


def split_import_clause(clause: str) -> List[str]:
    """Split a raw `{ ... }` body into trimmed, non-empty entries."""
    return [part.strip() for part in clause.split(",") if part.strip()]


def parse_named_import(entry: str) -> Optional[NamedImport]:
    """
    Parse one entry, `name` or `name as alias`.

    Returns None if the entry has any other form.
    """
    m = _NAMED_IMPORT_RE.match(entry.strip())
    if not m:
        return None
    return NamedImport(actual_name=m.group(1), local_name=m.group(2) or m.group(1))


def parse_named_imports(clause: str) -> Optional[List[NamedImport]]:
    """
    Parse a whole clause (multi-line clauses and trailing commas included).

    Returns None if any entry is malformed, so the caller can leave the
    import alone.
    """
    imports = []
    for entry in split_import_clause(clause):
        named = parse_named_import(entry)
        if named is None:
            return None
        imports.append(named)
    return imports


def render_named_import(named: NamedImport) -> str:
    if named.is_renamed:
        return f"{named.actual_name} as {named.local_name}"
    return named.actual_name


def render_named_imports(imports: List[NamedImport], specifier: str) -> str:
    """Render `import { a, b as c } from '<specifier>'` (no terminator)."""
    body = ", ".join(render_named_import(named) for named in imports)
    return f"import {{ {body} }} from '{specifier}'"


__all__ = [
    "split_import_clause",
    "parse_named_import",
    "parse_named_imports",
    "render_named_import",
    "render_named_imports",
]
