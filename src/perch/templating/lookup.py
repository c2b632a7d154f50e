"""Template store lookup over a kida Environment.

The resolver only produces names; this module is the store side of the
contract.  Each candidate is tried against the environment's loaders in
order and the first template that loads wins.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from kida import ChoiceLoader, Environment, FileSystemLoader
from kida.environment.exceptions import TemplateNotFoundError

from perch.config import ResolverConfig
from perch.errors import LayoutNotFoundError
from perch.formats import Format
from perch.layouts.descriptor import LayoutDescriptor
from perch.layouts.resolver import LayoutResolver

logger = logging.getLogger("perch.templating")


def create_environment(config: ResolverConfig) -> Environment:
    """Create a kida Environment over ``config.template_dirs``.

    Earlier directories shadow later ones, so a site's own layouts can
    override a theme's by listing the site directory first.
    """
    loader = ChoiceLoader([FileSystemLoader(str(d)) for d in config.template_dirs])
    return Environment(
        loader=loader,
        auto_reload=config.auto_reload,
    )


def find_template(env: Environment, candidates: Iterable[str]) -> tuple[str, Any]:
    """Return ``(name, template)`` for the first candidate that exists.

    Raises:
        LayoutNotFoundError: If no candidate exists. Lists every candidate
            tried, in order.
    """
    tried: list[str] = []
    for name in candidates:
        tried.append(name)
        try:
            template = env.get_template(name)
        except TemplateNotFoundError:
            continue
        logger.debug("Layout %s matched after %d candidates", name, len(tried))
        return name, template
    raise LayoutNotFoundError(tuple(tried))


class TemplateLookup:
    """Resolve layouts and load the winning template from kida.

    Usage::

        lookup = TemplateLookup(create_environment(config), LayoutResolver(config))
        html = lookup.render(LayoutDescriptor(kind="page", type="blog"), HTML, {"title": "Hi"})
    """

    __slots__ = ("_env", "_resolver")

    def __init__(self, env: Environment, resolver: LayoutResolver | None = None) -> None:
        self._env = env
        self._resolver = resolver or LayoutResolver()

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def resolver(self) -> LayoutResolver:
        return self._resolver

    def lookup(self, descriptor: LayoutDescriptor, fmt: Format) -> tuple[str, Any]:
        """Find the most specific existing layout for *descriptor*.

        Raises:
            UnsupportedKindError: If the descriptor's kind is not recognized.
            LayoutNotFoundError: If no candidate exists.
        """
        return find_template(self._env, self._resolver.resolve(descriptor, fmt))

    def lookup_base(self, descriptor: LayoutDescriptor, fmt: Format) -> tuple[str, Any] | None:
        """Find the layered base template for *descriptor*, if any.

        A missing base template is not an error: the page template is then
        rendered on its own.
        """
        try:
            return self.lookup(descriptor.with_baseof(), fmt)
        except LayoutNotFoundError:
            return None

    def render(
        self,
        descriptor: LayoutDescriptor,
        fmt: Format,
        context: Mapping[str, Any] | None = None,
    ) -> str:
        """Render the most specific existing layout with *context*."""
        _, template = self.lookup(descriptor, fmt)
        return template.render(dict(context or {}))
