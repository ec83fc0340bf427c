"""
Import-Shape Matchers: recognize lodash imports in raw source text and
rewrite the ones es-toolkit/compat can serve.

Five shapes are recognized, each by its own pattern, applied in this order:

    1. DEFAULT      import _ from 'lodash'
    2. NAMESPACE    import * as _ from 'lodash' | 'lodash-es'
    3. NAMED_LIST   import { a, b as c } from 'lodash' | 'lodash-es'
    4. SUBPATH      import isEqual from 'lodash/isEqual' | 'lodash-es/isEqual.js'
    5. STANDALONE   import isEqual from 'lodash.isequal'

Each pass replaces every non-overlapping occurrence in one left-to-right
scan. Text a pass does not rewrite is left byte-identical, and a rewritten
import never matches any of the patterns again, because the replacement
specifier is not a lodash specifier.

IMPORTANT: This is text matching, not parsing. Imports inside strings or
comments are seen like any other text, and usage detection for default and
namespace imports (`_.name`) is a plain scan of the whole file.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional, Tuple

from lodash_swap.capabilities import CapabilityRegistry
from lodash_swap.config import RewriteConfig
from lodash_swap.diagnostics import unique_names, warn_unsupported_functions, warn_unsupported_package
from lodash_swap.errors import InvariantViolation
from lodash_swap.model import ImportMatch, ImportShape, NamedImport
from lodash_swap.named_imports import parse_named_imports, render_named_imports

LOG = logging.getLogger("lodash_swap.matchers")

_QUOTE = r"""['"]"""


def _alternation(values: List[str]) -> str:
    # longest first so "lodash-es" is tried before "lodash"
    return "|".join(re.escape(v) for v in sorted(set(values), key=len, reverse=True))


class ImportPatterns:
    """Compiled patterns for the five shapes, built from a RewriteConfig."""

    def __init__(self, config: RewriteConfig):
        legacy = re.escape(config.legacy_module)
        roots = _alternation(config.root_specifiers)
        extensions = _alternation(config.subpath_extensions) if config.subpath_extensions else None
        ext_suffix = f"(?:{extensions})?" if extensions else ""

        self.default = re.compile(
            rf"import\s+(\w+)\s+from\s*{_QUOTE}({legacy}){_QUOTE}"
        )
        self.namespace = re.compile(
            rf"import\s*\*\s*as\s+(\w+)\s+from\s*{_QUOTE}({roots}){_QUOTE}"
        )
        self.named_list = re.compile(
            rf"import\s*\{{([\w\s,]*)\}}\s*from\s*{_QUOTE}({roots}){_QUOTE}"
        )
        self.subpath = re.compile(
            rf"import\s+(\w+)\s+from\s*{_QUOTE}({roots})/(\w+){ext_suffix}{_QUOTE}"
        )
        self.standalone = re.compile(
            rf"import\s+(\w+)\s+from\s*{_QUOTE}({legacy})\.(\w+){_QUOTE}"
        )


def find_member_usages(identifier: str, source: str) -> Optional[List[str]]:
    """
    Find the functions used through `<identifier>.<name>` anywhere in source.

    Args:
        identifier: Name bound by a default or namespace import
        source: Full (in-progress) source text

    Returns:
        Unique used names in first-seen order, or None when the identifier
        is never used via member access
    """
    pattern = re.compile(rf"\b{re.escape(identifier)}\.(\w+)")
    found = unique_names(m.group(1) for m in pattern.finditer(source))
    return found or None


class ImportMatchers:
    """
    The five matcher passes, bound to one registry and configuration.

    Matchers hold no state between calls; `passes()` gives them in the order
    the rewriter must apply them.
    """

    def __init__(self, config: RewriteConfig, registry: CapabilityRegistry):
        self.config = config
        self.registry = registry
        self.patterns = ImportPatterns(config)

    def passes(self) -> List[Tuple[ImportShape, Callable[[str], str]]]:
        return [
            (ImportShape.DEFAULT, self.rewrite_default_imports),
            (ImportShape.NAMESPACE, self.rewrite_namespace_imports),
            (ImportShape.NAMED_LIST, self.rewrite_named_list_imports),
            (ImportShape.SUBPATH, self.rewrite_subpath_imports),
            (ImportShape.STANDALONE, self.rewrite_standalone_imports),
        ]

    # ------------------------------------------------------------------
    # Shapes 1 and 2: whole-module bindings, decided by usage analysis
    # ------------------------------------------------------------------

    def rewrite_default_imports(self, source: str) -> str:
        """
        Replaces e.g.:
            import _ from 'lodash';
        with:
            import * as _ from 'es-toolkit/compat';
        provided every `_.<name>` in the file is supported.
        """
        def replace(m: re.Match) -> str:
            match = ImportMatch(
                shape=ImportShape.DEFAULT, text=m.group(0), binding=m.group(1), specifier=m.group(2)
            )
            return self._rewrite_module_binding(match, source)

        return self._sub(self.patterns.default, replace, source, ImportShape.DEFAULT)

    def rewrite_namespace_imports(self, source: str) -> str:
        """
        Replaces e.g.:
            import * as _ from 'lodash-es';
        with:
            import * as _ from 'es-toolkit/compat';
        under the same usage rule as default imports.
        """
        def replace(m: re.Match) -> str:
            match = ImportMatch(
                shape=ImportShape.NAMESPACE, text=m.group(0), binding=m.group(1), specifier=m.group(2)
            )
            return self._rewrite_module_binding(match, source)

        return self._sub(self.patterns.namespace, replace, source, ImportShape.NAMESPACE)

    def _rewrite_module_binding(self, match: ImportMatch, source: str) -> str:
        used = find_member_usages(match.binding, source)
        if used is None:
            # Never used via member access; left for tree shaking
            return match.text

        unsupported = [name for name in used if self.registry.is_unsupported(name)]
        if unsupported:
            warn_unsupported_functions(unsupported)
            return match.text

        return f"import * as {match.binding} from '{self.config.replacement_module}'"

    # ------------------------------------------------------------------
    # Shape 3: named lists, partitioned per name
    # ------------------------------------------------------------------

    def rewrite_named_list_imports(self, source: str) -> str:
        """
        Replaces e.g.:
            import { every, isEqual as eq } from 'lodash';
        with:
            import { isEqual as eq } from 'es-toolkit/compat';import { every } from 'lodash';
        (every being unsupported). Multi-line lists come out on one line.
        """
        def replace(m: re.Match) -> str:
            match = ImportMatch(
                shape=ImportShape.NAMED_LIST, text=m.group(0), raw_list=m.group(1), specifier=m.group(2)
            )
            imports = parse_named_imports(match.raw_list)
            if imports is None:
                return match.text

            supported = [named for named in imports if self.registry.is_supported(named.actual_name)]
            unsupported = [named for named in imports if self.registry.is_unsupported(named.actual_name)]

            if unsupported:
                warn_unsupported_functions(named.actual_name for named in unsupported)

            if not supported:
                return match.text

            rewritten = render_named_imports(supported, self.config.replacement_module)
            if unsupported:
                rewritten += ";" + render_named_imports(unsupported, match.specifier)
            return rewritten

        return self._sub(self.patterns.named_list, replace, source, ImportShape.NAMED_LIST)

    # ------------------------------------------------------------------
    # Shapes 4 and 5: one function per import
    # ------------------------------------------------------------------

    def rewrite_subpath_imports(self, source: str) -> str:
        """
        Replaces e.g.:
            import lodashIsEqual from 'lodash/isEqual.js';
        with:
            import { isEqual as lodashIsEqual } from 'es-toolkit/compat';
        """
        def replace(m: re.Match) -> str:
            match = ImportMatch(
                shape=ImportShape.SUBPATH,
                text=m.group(0),
                binding=m.group(1),
                specifier=m.group(2),
                subpath=m.group(3),
            )
            if self.registry.is_unsupported(match.subpath):
                warn_unsupported_functions([match.subpath])
                return match.text
            return self._render_single(match.subpath, match.binding)

        return self._sub(self.patterns.subpath, replace, source, ImportShape.SUBPATH)

    def rewrite_standalone_imports(self, source: str) -> str:
        """
        Replaces e.g.:
            import isEqual from 'lodash.isequal';
        with:
            import { isEqual } from 'es-toolkit/compat';
        The package suffix is matched case-insensitively against the registry.
        """
        def replace(m: re.Match) -> str:
            match = ImportMatch(
                shape=ImportShape.STANDALONE,
                text=m.group(0),
                binding=m.group(1),
                specifier=f"{m.group(2)}.{m.group(3)}",
                subpath=m.group(3),
            )
            package_name = match.subpath.lower()
            if self.registry.is_unsupported_standalone_package(package_name):
                warn_unsupported_package(match.specifier)
                return match.text

            function_name = self.registry.resolve_standalone_name(package_name)
            if function_name is None:
                raise InvariantViolation(
                    f"Package '{match.specifier}' is supported but resolves to no function name"
                )
            return self._render_single(function_name, match.binding)

        return self._sub(self.patterns.standalone, replace, source, ImportShape.STANDALONE)

    def _render_single(self, function_name: str, binding: str) -> str:
        named = NamedImport(actual_name=function_name, local_name=binding)
        return render_named_imports([named], self.config.replacement_module)

    def _sub(self, pattern: re.Pattern, replace: Callable[[re.Match], str], source: str, shape: ImportShape) -> str:
        result, count = pattern.subn(replace, source)
        if count:
            LOG.debug("%s: %d import(s) matched", shape.value, count)
        return result


__all__ = ["ImportPatterns", "ImportMatchers", "find_member_usages"]
