"""Resolver configuration.

ResolverConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

from perch.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Layout resolution configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ResolverConfig(reserved_names=("shortcodes", "partials", "_internal"))
    """

    # Directory names
    default_dir: str = "_default"
    markup_dir: str = "_markup"  # Render hooks live under <prefix>/_markup/
    reserved_names: tuple[str, ...] = ("shortcodes", "partials")

    # Layered base templates
    baseof_name: str = "baseof"
    baseof_suffix: str = "-baseof"

    # Candidate composition
    extension_separator: str = "."
    group_language_variants: bool = False  # Emit lang forms as a block per (prefix, pass)

    # Template store
    template_dirs: tuple[str | Path, ...] = ("layouts",)
    auto_reload: bool = False

    def __post_init__(self) -> None:
        if not self.default_dir:
            msg = "default_dir must not be empty"
            raise ConfigurationError(msg)
        if not self.baseof_name:
            msg = "baseof_name must not be empty"
            raise ConfigurationError(msg)
        if not self.extension_separator:
            msg = "extension_separator must not be empty"
            raise ConfigurationError(msg)
        if "/" in self.markup_dir.strip("/"):
            msg = f"markup_dir must be a single path segment, got {self.markup_dir!r}"
            raise ConfigurationError(msg)
