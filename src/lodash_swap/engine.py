"""
Transform Driver: the entry point a build pipeline calls once per file.

    rewriter = es_toolkit_plugin()
    result = rewriter.transform(source, "src/app.ts")
    if result is not None:
        source = result.code

A rewriter owns its CapabilityRegistry and a ResultCache keyed by the exact
input text. Both live exactly as long as the rewriter.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from lodash_swap.capabilities import CapabilityRegistry
from lodash_swap.config import RewriteConfig
from lodash_swap.matchers import ImportMatchers
from lodash_swap.model import TransformResult

LOG = logging.getLogger("lodash_swap.engine")

PLUGIN_NAME = "vite:es-toolkit"


class _NullLock:
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class ResultCache:
    """
    Transform results keyed by raw source text.

    Grows without bound for the life of its rewriter. Pass `thread_safe=True`
    when one rewriter is shared between threads.
    """

    def __init__(self, thread_safe: bool = False):
        self._entries: Dict[str, TransformResult] = {}
        self._lock = threading.Lock() if thread_safe else _NullLock()

    def get(self, source: str) -> Optional[TransformResult]:
        with self._lock:
            return self._entries.get(source)

    def put(self, source: str, result: TransformResult) -> None:
        with self._lock:
            self._entries[source] = result

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, source: str) -> bool:
        with self._lock:
            return source in self._entries


class ImportRewriter:
    """
    Rewrites lodash imports to es-toolkit/compat imports where safe.

    Args:
        config: Rewrite settings; defaults to lodash → es-toolkit/compat
        registry: Capability registry; defaults to the bundled export list
            adjusted by `config.extra_supported` / `config.excluded`
        cache: Result cache; defaults to a fresh unlocked ResultCache
    """

    name = PLUGIN_NAME

    def __init__(
        self,
        config: Optional[RewriteConfig] = None,
        registry: Optional[CapabilityRegistry] = None,
        cache: Optional[ResultCache] = None,
    ):
        self.config = config or RewriteConfig()
        self.registry = registry if registry is not None else CapabilityRegistry.from_config(self.config)
        self.cache = cache if cache is not None else ResultCache()
        self.matchers = ImportMatchers(self.config, self.registry)

    def transform(self, source: str, file_id: Optional[str] = None) -> Optional[TransformResult]:
        """
        Rewrite the lodash imports of one source file.

        Args:
            source: Source text; need not be well-formed
            file_id: Host-supplied file identifier (only used for logging)

        Returns:
            TransformResult with `map=None`, or None when the source never
            mentions the legacy module (or an alias) and the host should keep it as is

        Raises:
            InvariantViolation: On an internal rewriter defect
        """
        if not any(specifier in source for specifier in self.config.root_specifiers):
            return None

        cached = self.cache.get(source)
        if cached is not None:
            LOG.debug("cache hit for %s", file_id or "<source>")
            return cached

        code = source
        for _, rewrite in self.matchers.passes():
            code = rewrite(code)

        result = TransformResult(code=code, map=None)
        self.cache.put(source, result)
        if result.changed(source):
            LOG.debug("rewrote lodash imports in %s", file_id or "<source>")
        return result

    def rewrite(self, source: str) -> str:
        """Rewritten text, or the input itself when nothing applies."""
        result = self.transform(source)
        return source if result is None else result.code

    def supported_functions(self) -> List[str]:
        return sorted(self.registry.names)

    def clear_cache(self) -> None:
        self.cache.clear()


def es_toolkit_plugin(config: Optional[RewriteConfig] = None, thread_safe: bool = False) -> ImportRewriter:
    """Build a rewriter for host pipelines, optionally with a locked cache."""
    return ImportRewriter(config=config, cache=ResultCache(thread_safe=thread_safe))


__all__ = ["PLUGIN_NAME", "ResultCache", "ImportRewriter", "es_toolkit_plugin"]
