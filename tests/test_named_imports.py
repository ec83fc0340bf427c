"""
Tests for the named-import clause parser and renderer.
"""

import pytest

from lodash_swap.model import NamedImport
from lodash_swap.named_imports import (
    split_import_clause,
    parse_named_import,
    parse_named_imports,
    render_named_import,
    render_named_imports,
)


class TestSplitClause:
    """Splitting a raw clause into entries."""

    def test_trims_and_drops_empty_entries(self):
        """Entries are trimmed; blanks from trailing commas dropped."""
        assert split_import_clause(" a ,b,\n  c,\n") == ["a", "b", "c"]

    def test_empty_clause(self):
        """Whitespace-only clause has no entries."""
        assert split_import_clause("  \n ") == []


class TestParseNamedImport:
    """Parsing entries into NamedImport."""

    def test_plain_name(self):
        """Bare name: local name equals actual name."""
        named = parse_named_import("isEqual")
        assert named == NamedImport("isEqual", "isEqual")
        assert not named.is_renamed

    def test_renamed(self):
        """`as` clause gives a separate local name."""
        named = parse_named_import("isEqual as eq")
        assert named.actual_name == "isEqual"
        assert named.local_name == "eq"
        assert named.is_renamed

    def test_extra_whitespace_around_as(self):
        """Any whitespace, newlines included, around `as`."""
        assert parse_named_import("isEqual   as\n  eq") == NamedImport("isEqual", "eq")

    @pytest.mark.parametrize("entry", ["isEqual as", "a b c", "a as b as c", "default as x y", "a-b"])
    def test_malformed(self, entry):
        """Anything other than `name` or `name as alias` is rejected."""
        assert parse_named_import(entry) is None

    def test_whole_clause_rejected_if_any_entry_malformed(self):
        """One bad entry rejects the whole clause."""
        assert parse_named_imports("isEqual, map as") is None

    def test_multiline_clause(self):
        """Multi-line clause with trailing comma parses cleanly."""
        assert parse_named_imports("\n  isEqual,\n  map as m,\n") == [
            NamedImport("isEqual"),
            NamedImport("map", "m"),
        ]


class TestNamedImportModel:
    """NamedImport invariants."""

    def test_local_name_defaults_to_actual_name(self):
        """Missing local name falls back to the actual name."""
        assert NamedImport("get").local_name == "get"

    def test_actual_name_required(self):
        """Empty actual name is refused."""
        with pytest.raises(ValueError):
            NamedImport("")


class TestRender:
    """Rendering back to import text."""

    def test_render_single(self):
        """Rename rendered only when names differ."""
        assert render_named_import(NamedImport("get")) == "get"
        assert render_named_import(NamedImport("get", "lodashGet")) == "get as lodashGet"

    def test_render_statement(self):
        """Full statement with single-quoted specifier, no terminator."""
        imports = [NamedImport("isEqual"), NamedImport("map", "m")]
        assert render_named_imports(imports, "es-toolkit/compat") == (
            "import { isEqual, map as m } from 'es-toolkit/compat'"
        )
