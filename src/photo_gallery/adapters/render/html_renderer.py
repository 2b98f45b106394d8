"""Static HTML gallery renderer."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from photo_gallery.core import Gallery, GalleryRenderer, Sink, WriteError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "gallery.html.j2"
DEFAULT_TITLE = "Great Lakes Live Photos"


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class HtmlGalleryRenderer(GalleryRenderer):
    """Render the gallery as a single masonry HTML page."""

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        refresh_seconds: int = 1800,
        env: Optional[Environment] = None,
        template_name: str = DEFAULT_TEMPLATE,
    ) -> None:
        """Initialize renderer.

        Args:
            title: Page title
            refresh_seconds: Browser auto-refresh interval, 0 disables it
            env: Jinja2 environment. Defaults to the packaged templates.
            template_name: Template to render within env
        """
        self.title = title
        self.refresh_seconds = refresh_seconds
        self.template_name = template_name
        self.env = env or Environment(
            loader=PackageLoader("photo_gallery", "templates"),
            autoescape=select_autoescape(["html", "j2"]),
            keep_trailing_newline=True,
        )

    def render_html(self, gallery: Gallery) -> str:
        """Compose the HTML document, one tile per photo in gallery order."""
        try:
            template = self.env.get_template(self.template_name)
            return template.render(
                title=self.title,
                refresh_seconds=self.refresh_seconds,
                photos=list(gallery),
            )
        except TemplateError as e:
            raise WriteError(f"failed to render template: {e}") from e

    def render(self, gallery: Gallery, sink: Sink) -> None:
        """Render gallery and write it to a path or text stream in one pass."""
        document = self.render_html(gallery)

        if isinstance(sink, (str, Path)):
            self._write_file(Path(sink), document)
        else:
            try:
                sink.write(document)
            except OSError as e:
                raise WriteError(f"failed to write output: {e}") from e

        logger.info(f"Rendered {len(gallery)} photos")

    def _write_file(self, output_path: Path, document: str) -> None:
        """Write document atomically: temp file in the same directory, then rename."""
        tmp_name = None
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(document)
            # mkstemp creates 0600; published pages get the usual 0666 & ~umask
            os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, output_path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise WriteError(f"failed to create output file {output_path}: {e}") from e
