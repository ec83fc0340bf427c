"""
Diagnostics for imports that could not be rewritten.

The rewriter only decides THAT a warning is warranted and WHAT it names.
Warnings are issued through the `warnings` module so the host decides
whether they are displayed, silenced, or escalated to errors.
"""

import warnings
from typing import Iterable, List


class UnsupportedFunctionWarning(UserWarning):
    """A lodash function is used that es-toolkit/compat does not export."""
    pass


class UnsupportedPackageWarning(UserWarning):
    """A standalone `lodash.<name>` package has no es-toolkit/compat counterpart."""
    pass


def unique_names(names: Iterable[str]) -> List[str]:
    """De-duplicate names, keeping first-seen order."""
    return list(dict.fromkeys(names))


def format_unsupported_functions(names: List[str]) -> str:
    """
    Build the message for unsupported functions.

    Examples:
        ["every"]          -> "Unsupported lodash function: every"
        ["every", "some"]  -> "Unsupported lodash functions: every, some"
    """
    plural = "s" if len(names) > 1 else ""
    return f"Unsupported lodash function{plural}: {', '.join(names)}"


def format_unsupported_package(package: str) -> str:
    return f"Unsupported lodash package: {package}"


def warn_unsupported_functions(names: Iterable[str]) -> None:
    names = unique_names(names)
    if not names:
        return
    warnings.warn(format_unsupported_functions(names), UnsupportedFunctionWarning, stacklevel=2)


def warn_unsupported_package(package: str) -> None:
    warnings.warn(format_unsupported_package(package), UnsupportedPackageWarning, stacklevel=2)


__all__ = [
    "UnsupportedFunctionWarning",
    "UnsupportedPackageWarning",
    "unique_names",
    "format_unsupported_functions",
    "format_unsupported_package",
    "warn_unsupported_functions",
    "warn_unsupported_package",
]
