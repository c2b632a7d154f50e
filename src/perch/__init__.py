"""Perch: layout candidate resolution for template-driven rendering.

Given what is being rendered and what it is rendered to, perch produces
the ordered template names a template store should try.  Most specific
wins.

Basic usage::

    from perch import HTML, LayoutDescriptor, LayoutResolver

    resolver = LayoutResolver()
    resolver.resolve(LayoutDescriptor(kind="section", section="blog"), HTML)
    # ('blog/blog.html.html', 'blog/section.html.html', ...)

Template lookup against kida::

    from perch.templating import TemplateLookup, create_environment
    lookup = TemplateLookup(create_environment(ResolverConfig()))
    name, template = lookup.lookup(LayoutDescriptor(kind="home"), HTML)
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "AMP",
    "HTML",
    "JSON",
    "RSS",
    "ConfigurationError",
    "Format",
    "Kind",
    "LayoutDescriptor",
    "LayoutNotFoundError",
    "LayoutResolver",
    "MediaType",
    "PerchError",
    "ResolutionCache",
    "ResolverConfig",
    "UnknownFormatError",
    "UnsupportedKindError",
    "get_format",
    "resolve_layouts",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name in ("LayoutDescriptor", "Kind"):
        from perch.layouts import descriptor as _descriptor

        return getattr(_descriptor, name)

    if name in ("LayoutResolver", "resolve_layouts"):
        from perch.layouts import resolver as _resolver

        return getattr(_resolver, name)

    if name == "ResolutionCache":
        from perch.layouts.cache import ResolutionCache

        return ResolutionCache

    if name == "ResolverConfig":
        from perch.config import ResolverConfig

        return ResolverConfig

    if name in ("AMP", "HTML", "JSON", "RSS", "Format", "MediaType", "get_format"):
        from perch import formats as _formats

        return getattr(_formats, name)

    if name in (
        "ConfigurationError",
        "LayoutNotFoundError",
        "PerchError",
        "UnknownFormatError",
        "UnsupportedKindError",
    ):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
