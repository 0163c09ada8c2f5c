from __future__ import annotations


class I18nError(ValueError):
    """Base class for catalog and configuration errors."""


class MalformedCatalogEntry(I18nError):
    """A catalog leaf is not a string (or a catalog file is not an object)."""

    def __init__(self, path: tuple[str, ...], value: object) -> None:
        self.path = path
        self.value = value
        super().__init__(
            f"Malformed catalog entry at '{'.'.join(path) or '<root>'}': "
            f"expected text or object, got '{type(value).__name__}'"
        )


class DuplicateKey(I18nError):
    """Two distinct source paths flatten to the same dotted key."""

    def __init__(self, key: str, first: tuple[str, ...], second: tuple[str, ...]) -> None:
        self.key = key
        self.first = first
        self.second = second
        super().__init__(
            f"Duplicate translation key '{key}' produced by "
            f"'{'/'.join(first)}' and '{'/'.join(second)}'"
        )


class InvalidRoutePattern(I18nError):
    """The wildcard marker appears somewhere other than the end of a pattern."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"Invalid route pattern '{pattern}': '*' is only allowed as the last character")
