"""Perch exception hierarchy.

Shared across the resolver, the format table, the template lookup and the
CLI so every module raises and catches the same types.
"""

from dataclasses import dataclass


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when resolver configuration is invalid."""


@dataclass(frozen=True, slots=True)
class UnsupportedKindError(PerchError):
    """The descriptor's kind is not a known page kind or rendering hook.

    This is a programming or configuration error in the caller, not a
    transient condition, and is never retried.
    """

    kind: str

    def __str__(self) -> str:
        return f"Unsupported layout kind: {self.kind!r}"


@dataclass(frozen=True, slots=True)
class UnknownFormatError(PerchError):
    """No built-in output format is registered under this name."""

    name: str

    def __str__(self) -> str:
        return f"Unknown output format: {self.name!r}"


@dataclass(frozen=True, slots=True)
class LayoutNotFoundError(PerchError):
    """None of the resolved candidates exists in the template store.

    Carries every candidate that was tried, in lookup order, so the
    message shows exactly where a template could have been placed.
    """

    candidates: tuple[str, ...]

    def __str__(self) -> str:
        if not self.candidates:
            return "No layout candidates to look up"
        tried = ", ".join(self.candidates)
        return f"No layout found. Tried: {tried}"
