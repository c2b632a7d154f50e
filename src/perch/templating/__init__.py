"""Template store side of layout resolution.

Tries resolved candidates against a kida Environment, first hit wins::

    env = create_environment(ResolverConfig(template_dirs=("layouts", "themes/base/layouts")))
    lookup = TemplateLookup(env)
    name, template = lookup.lookup(LayoutDescriptor(kind="home"), HTML)
"""

from perch.templating.lookup import TemplateLookup, create_environment, find_template

__all__ = ["TemplateLookup", "create_environment", "find_template"]
