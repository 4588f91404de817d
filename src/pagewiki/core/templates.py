"""Layout and content template composition.

Every rendered page shares one layout template. The layout pulls in the
route's content template through the ``main`` slot::

    <body>{% include main %}</body>

Templates are parsed once when the registry is built and are not reloaded.
"""

import logging
from pathlib import Path
from types import MappingProxyType

from jinja2 import Environment, FileSystemLoader, Template, TemplateError, select_autoescape

from pagewiki.core.exceptions import TemplateRenderError
from pagewiki.core.models import Layout

logger = logging.getLogger(__name__)

LAYOUT_TEMPLATE = "layout.html"
CONTENT_TEMPLATES = ("view", "edit", "list")
MAIN_SLOT = "main"


class TemplateRegistry:
    """Immutable set of parsed templates, built once at startup."""

    def __init__(
        self,
        directory: Path,
        content_names: tuple[str, ...] = CONTENT_TEMPLATES,
    ):
        self.directory = directory
        env = Environment(
            loader=FileSystemLoader(str(directory)),
            autoescape=select_autoescape(["html"]),
            auto_reload=False,
        )
        # Missing templates fail here rather than on first request.
        self._layout = env.get_template(LAYOUT_TEMPLATE)
        self._content = MappingProxyType(
            {name: env.get_template(f"{name}.html") for name in content_names}
        )
        logger.info(
            "Loaded %d content templates from %s", len(self._content), directory
        )

    @property
    def content_names(self) -> tuple[str, ...]:
        return tuple(self._content)

    def get(self, name: str) -> Template:
        try:
            return self._content[name]
        except KeyError:
            raise TemplateRenderError(f'no such template "{name}.html"') from None

    def render_with_layout(self, layout: Layout, content_name: str) -> str:
        """Render a content template inside the shared layout.

        Raises:
            TemplateRenderError: if the content template is unknown or
                rendering fails.
        """
        content = self.get(content_name)
        try:
            return self._layout.render(
                {MAIN_SLOT: content, "layout": layout, "child": layout.child}
            )
        except TemplateError as exc:
            raise TemplateRenderError(str(exc)) from exc
