"""Exception types raised by lodash_swap."""


class LodashSwapError(Exception):
    """Base class for all lodash_swap errors."""
    pass


class ConfigError(LodashSwapError):
    """Raised when a configuration file cannot be interpreted."""
    pass


class InvariantViolation(LodashSwapError):
    """
    Raised when the rewriter reaches a state that indicates a bug in the
    rewriter itself rather than a problem with the input source.

    Output correctness cannot be guaranteed past this point, so the
    transform is aborted.
    """
    pass


__all__ = ["LodashSwapError", "ConfigError", "InvariantViolation"]
