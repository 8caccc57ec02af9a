"""Exception types raised by fastfuzzy.

All errors derive from FastFuzzyError. The concrete classes also derive from
the matching built-in exception so callers catching ValueError or TypeError
keep working.
"""


class FastFuzzyError(Exception):
    """Base class for all fastfuzzy errors."""


class ValidationError(FastFuzzyError, ValueError):
    """An option was given a value outside its accepted domain."""


class KeySelectorError(FastFuzzyError, TypeError):
    """A key selector returned something other than a string or list of strings."""

    def __init__(self, item, key):
        self.item = item
        self.key = key
        super().__init__(
            f"key_selector must return a string or a list of strings, "
            f"got {type(key).__name__} for item {item!r}"
        )


__all__ = ["FastFuzzyError", "ValidationError", "KeySelectorError"]
