"""Stylesheet rendering with Jinja2 templates.

Each font format has its own template, named ``<format>.css.j2``. Templates
receive a ``faces`` list of FontFace dictionaries, one per @font-face rule,
in request order.
"""

from collections.abc import Sequence
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
)

from facesmith.domain.font import FontFace, FontFormat, FontRecord
from facesmith.exceptions import RenderFailure, TemplateLoadError

BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_SUFFIX = ".css.j2"


def template_name(font_format: FontFormat) -> str:
    """Return the template file name for a format (e.g., "woff.css.j2")."""
    return f"{font_format.value}{TEMPLATE_SUFFIX}"


def load_faces(records: Sequence[FontRecord]) -> list[FontFace]:
    """Read resolved fonts into template data.

    Raises:
        RenderFailure: If a font file cannot be read
    """
    faces = []
    for record in records:
        try:
            faces.append(FontFace.from_record(record))
        except OSError as e:
            raise RenderFailure(f"{record.path}: {e.strerror or e}") from e
    return faces


class StylesheetRenderer:
    """Renders @font-face stylesheets from per-format templates.

    Templates in ``templates_dir`` take precedence over the bundled ones.

    Example:
        renderer = StylesheetRenderer()
        renderer.check()
        css = renderer.render(FontFormat.WOFF, faces)
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        search_path = [BUNDLED_TEMPLATES_DIR]
        if templates_dir is not None:
            search_path.insert(0, templates_dir)
        self._search_path = search_path
        self._env = Environment(
            loader=FileSystemLoader([str(p) for p in search_path]),
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )

    @property
    def search_path(self) -> list[Path]:
        return list(self._search_path)

    def _template(self, font_format: FontFormat) -> Template:
        return self._env.get_template(template_name(font_format))

    def check(self) -> None:
        """Load and compile every format's template ahead of serving.

        Raises:
            TemplateLoadError: If a template is missing or has syntax errors
        """
        for font_format in FontFormat:
            name = template_name(font_format)
            try:
                self._template(font_format)
            except TemplateNotFound as e:
                raise TemplateLoadError(name, "not found") from e
            except TemplateError as e:
                raise TemplateLoadError(name, str(e)) from e

    def render(self, font_format: FontFormat, faces: Sequence[FontFace]) -> str:
        """Render the stylesheet for the given faces.

        Raises:
            RenderFailure: If the template cannot be loaded or rendered
        """
        try:
            template = self._template(font_format)
            return template.render(faces=[face.to_dict() for face in faces])
        except TemplateError as e:
            raise RenderFailure(f"{template_name(font_format)}: {e}") from e
