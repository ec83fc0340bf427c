"""
lodash_swap: build-time import rewriter (lodash → es-toolkit/compat)

Rewrites the import declarations of a single source file so that lodash
functions which es-toolkit/compat implements are pulled from es-toolkit
instead.

ARCHITECTURAL GUARANTEE:
------------------------
This package works on raw source TEXT only. It knows nothing of:
    - Syntax trees
    - Call sites (only import declarations are touched)
    - Whether a replacement behaves identically at runtime

The export list of es-toolkit/compat is the sole source of truth for what
may be replaced. Anything else is left byte-identical.
"""

from lodash_swap.config import RewriteConfig
from lodash_swap.engine import ImportRewriter, ResultCache, es_toolkit_plugin
from lodash_swap.model import TransformResult

__version__ = "0.1.0"

__all__ = [
    "ImportRewriter",
    "ResultCache",
    "RewriteConfig",
    "TransformResult",
    "es_toolkit_plugin",
]
