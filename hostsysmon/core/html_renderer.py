"""Markdown to HTML rendering through an external converter."""
import logging
from pathlib import Path

from ..collectors.base import run_command, tool_available
from .errors import CollectorError, RenderError

logger = logging.getLogger(__name__)


class HtmlRenderer:
    """Wraps pandoc (or a compatible converter taking `<in> -o <out>`)."""

    def __init__(self, command: str = "pandoc"):
        self.command = command

    def available(self) -> bool:
        return bool(self.command) and tool_available(self.command)

    def render(self, markdown_path: Path) -> Path:
        """Render next to the Markdown file, with the same base name."""
        html_path = markdown_path.with_suffix(".html")
        try:
            run_command([self.command, str(markdown_path), "-o", str(html_path)])
        except CollectorError as e:
            raise RenderError(str(e)) from e

        if not html_path.is_file():
            raise RenderError(f"{self.command} did not produce {html_path.name}")
        logger.info("Rendered %s", html_path)
        return html_path
