"""Layout candidate resolution.

Given what is being rendered (a ``LayoutDescriptor``) and what it is
rendered to (a ``Format``), produce the ordered template names the
template store should try.  The first one that exists wins, so order is
precedence: most specific first, never sorted.

Candidates are crossed in this order::

    for prefix in prefixes:          # section/, section, _default
        for pass in passes:          # tagged .amp.html, then plain .html
            for name in names:       # mylayout, sect1, section, list
                [name.<lang>.<ext>,] name.<ext>

followed by the format's internal fallback (when not resolving the layered
base template), then de-duplicated keeping the first occurrence.

``resolve_layouts()`` is pure and uncached.  ``LayoutResolver`` memoizes
it per ``(config, descriptor, format)`` through an injected ``ResolutionCache``.
"""

import logging

from perch.config import ResolverConfig
from perch.formats import Format
from perch.layouts.cache import ResolutionCache
from perch.layouts.compose import compose_pass, passes_for
from perch.layouts.descriptor import LayoutDescriptor
from perch.layouts.names import build_names, expand_baseof
from perch.layouts.prefixes import build_prefixes, join_path
from perch.layouts.rules import rule_for

logger = logging.getLogger("perch.layouts")

_DEFAULT_CONFIG = ResolverConfig()


def resolve_layouts(
    descriptor: LayoutDescriptor,
    fmt: Format,
    config: ResolverConfig | None = None,
) -> tuple[str, ...]:
    """Resolve the ordered, de-duplicated layout candidates.

    Args:
        descriptor: What is being rendered.
        fmt: The output format being rendered to.
        config: Resolution settings. Defaults to ``ResolverConfig()``.

    Returns:
        Relative, slash-separated template names, most specific first.
        Never empty.

    Raises:
        UnsupportedKindError: If the descriptor's kind is not recognized.
    """
    cfg = config or _DEFAULT_CONFIG
    rule = rule_for(descriptor)

    names = build_names(descriptor, fmt, rule)
    if descriptor.baseof:
        names = expand_baseof(names, cfg)
    prefixes = build_prefixes(descriptor, rule, cfg)
    passes = passes_for(fmt, cfg)
    markup = cfg.markup_dir if rule.render_hook else ""

    candidates: list[str] = []
    for prefix in prefixes:
        for ext_pass in passes:
            candidates.extend(
                join_path(prefix, markup, filename)
                for filename in compose_pass(names, ext_pass, descriptor.lang, cfg)
            )

    if fmt.internal_fallback and not descriptor.baseof:
        candidates.append(fmt.internal_fallback)

    return tuple(dict.fromkeys(candidates))


class LayoutResolver:
    """Memoizing layout resolver.

    Owns its cache; share one resolver (or one cache) across render
    workers.  Entries are keyed by config as well, so resolvers with
    different configs can share a cache.  Safe to call from any number of
    threads.

    Usage::

        resolver = LayoutResolver()
        resolver.resolve(LayoutDescriptor(kind="section", section="blog"), HTML)
    """

    __slots__ = ("_cache", "_config")

    def __init__(
        self,
        config: ResolverConfig | None = None,
        cache: ResolutionCache | None = None,
    ) -> None:
        self._config = config or _DEFAULT_CONFIG
        self._cache = cache if cache is not None else ResolutionCache()

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def cache(self) -> ResolutionCache:
        return self._cache

    def resolve(self, descriptor: LayoutDescriptor, fmt: Format) -> tuple[str, ...]:
        """Resolve candidates for *descriptor* in *fmt*, memoized.

        Raises:
            UnsupportedKindError: If the descriptor's kind is not recognized.
        """

        def compute() -> tuple[str, ...]:
            layouts = resolve_layouts(descriptor, fmt, self._config)
            logger.debug(
                "Resolved %d layout candidates for kind=%r format=%s",
                len(layouts),
                descriptor.kind,
                fmt.name,
            )
            return layouts

        return self._cache.get_or_compute((self._config, descriptor, fmt), compute)

    def clear(self) -> None:
        """Drop all memoized resolutions."""
        self._cache.clear()
