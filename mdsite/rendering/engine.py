"""Template set loading and the per-document render pipeline."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import (
    DictLoader,
    Environment,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from ..core.errors import TemplateRenderError, TemplateSetError
from ..core.models import Document
from .io import atomic_write_text, read_source
from .markdown import extract_title, markdown_to_html

logger = logging.getLogger(__name__)

TEMPLATE_GLOB = "*.html"


class TemplateSet:
    """Templates parsed once from a directory and shared by every render.

    Only the files matched when the set was loaded can be rendered or
    referenced from another template (``extends``/``include``).
    """

    def __init__(self, sources: dict[str, str]) -> None:
        self._environment = Environment(
            loader=DictLoader(dict(sources)),
            undefined=StrictUndefined,
            autoescape=select_autoescape(["html"]),
            keep_trailing_newline=True,
        )
        self._names = tuple(sorted(sources))
        for name in self._names:
            try:
                self._environment.get_template(name)
            except TemplateError as e:
                raise TemplateSetError(f"Error in parsing {name}: {e}") from e

    @classmethod
    def from_directory(cls, template_dir: Path, pattern: str = TEMPLATE_GLOB) -> TemplateSet:
        """Load every template of ``template_dir`` matching ``pattern``.

        A missing directory gives an empty set.

        Raises:
            TemplateSetError: If a template cannot be read or parsed
        """
        sources: dict[str, str] = {}
        for path in template_dir.glob(pattern):
            if not path.is_file():
                continue
            try:
                sources[path.name] = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise TemplateSetError(f"Error in reading {path}: {e}") from e

        logger.debug(f"Loaded {len(sources)} template(s) from {template_dir}")
        return cls(sources)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def render(self, name: str, context: dict[str, str]) -> str:
        """Render template ``name`` against ``context``.

        Raises:
            TemplateRenderError: If the template is not in the set, references
                an undefined variable or fails while rendering
        """
        try:
            template = self._environment.get_template(name)
        except TemplateNotFound as e:
            raise TemplateRenderError(
                f"Failed to render template: {name!r} not found in template set"
            ) from e
        try:
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(f"Failed to render template {name!r}: {e}") from e


def output_path_for(source: Path, out_dir: Path) -> Path:
    """Return ``<out_dir>/<stem>.html`` for a markdown source."""
    return out_dir / f"{source.stem}.html"


def load_document(source: Path) -> Document:
    """Read a markdown source and derive its title and HTML fragment."""
    markdown = read_source(source)
    return Document(
        source=source,
        markdown=markdown,
        title=extract_title(markdown),
        html=markdown_to_html(markdown),
    )


def render_document(
    source: Path, template_name: str, templates: TemplateSet, out_dir: Path
) -> Path:
    """Render one markdown source to its HTML page.

    Args:
        source: Markdown source file
        template_name: Name of the page template in ``templates``
        templates: Loaded template set
        out_dir: Directory receiving the page

    Returns:
        Output file path
    """
    logger.debug(f"Rendering document: {source}")

    document = load_document(source)
    rendered_text = templates.render(template_name, document.context())

    output_path = output_path_for(source, out_dir)
    atomic_write_text(output_path, rendered_text)
    logger.info(f"Rendered {source} → {output_path}")

    return output_path
