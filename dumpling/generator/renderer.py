"""Render description Markdown with syntax highlighting and cross-references."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from markupsafe import Markup
from pygments.formatters.html import HtmlFormatter

from dumpling._constants import DEFAULT_DESCRIPTION

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


class HtmlContentRenderer:
    """Render description prose with consistent styling."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        link_extension: Extension | None = None,
        *,
        default_description: str = DEFAULT_DESCRIPTION,
    ) -> None:
        """Initialize a renderer with a pygments style and link extension.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        link_extension : Extension, optional
            Markdown extension that resolves API cross-references; pass ``None``
            to leave reference links as Markdown handles them.
        default_description : str, optional
            Markdown rendered by :meth:`description` when no text is available.
        """
        self.pygments_style = pygments_style
        self.default_description = default_description
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._link_extension = link_extension

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> Markup:
        """Render markdown into HTML using the configured extensions.

        Empty or whitespace-only input renders as an empty string. The result
        is marked safe for Jinja templates.
        """
        if not text.strip():
            return Markup("")
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
        ]
        if self._link_extension:
            extensions.append(self._link_extension)
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        html = md.convert(text)
        return Markup(self._annotate_codehilite(html, text))

    def description(self, text: str | None) -> Markup:
        """Render ``text``, falling back to the default description when missing."""
        if text is None or not text.strip():
            return self.markdown(self.default_description)
        return self.markdown(text)

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))


__all__ = ["CODE_BLOCK_PATTERN", "HtmlContentRenderer"]
