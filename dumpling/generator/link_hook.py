"""Resolve Markdown reference links in API prose to documentation anchors."""

from __future__ import annotations

import logging
import re
import typing as typ

from markdown import util
from markdown.extensions import Extension
from markdown.inlinepatterns import REFERENCE_RE, ReferenceInlineProcessor

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from dumpling.links import LinkResolver
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any
    LinkResolver = typ.Any

logger = logging.getLogger(__name__)

# Backslash escapes are stashed as STX + ord(char) + ETX.
ESCAPED_CHAR_RE = re.compile(f"{util.STX}([0-9]+){util.ETX}")


class CrossReferenceExtension(Extension):
    """Turn undefined reference links into links to API classes and members.

    Insert this extension into a ``markdown.Markdown`` instance so prose such as
    ``See [Part.Size] or [the size][Part.Size].`` links to the member without a
    literal URL. Labels with an explicit ``[label]: url`` definition keep it;
    any other label is handed to the active :class:`~dumpling.links.LinkResolver`
    and, when that fails, stays as the bracketed source text.
    """

    def __init__(self, resolver: LinkResolver) -> None:
        super().__init__()
        self.resolver = resolver

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Replace the stock reference processors on the Markdown instance."""
        md.inlinePatterns.register(
            CrossReferenceInlineProcessor(REFERENCE_RE, md, self.resolver),
            "reference",
            170,
        )
        md.inlinePatterns.register(
            ShortCrossReferenceInlineProcessor(REFERENCE_RE, md, self.resolver),
            "short_reference",
            130,
        )


class CrossReferenceInlineProcessor(ReferenceInlineProcessor):
    """Handle ``[text][label]`` links, resolving labels the document leaves undefined."""

    def __init__(self, pattern: str, md: Markdown, resolver: LinkResolver) -> None:
        super().__init__(pattern, md)
        self.resolver = resolver

    def handleMatch(  # type: ignore[override]  # noqa: N802
        self, m: re.Match[str], data: str
    ) -> tuple[Element | None, int | None, int | None]:
        """Build the anchor for a reference link, or leave the text untouched."""
        text, index, handled = self.getText(data, m.end(0))
        if not handled:
            return None, None, None
        label, end, handled = self.evalId(data, index, text)
        if not handled:
            return None, None, None
        label = self.NEWLINE_CLEANUP_RE.sub(" ", label)

        key = label.lower()
        if key in self.md.references:
            href, title = self.md.references[key]
            return self.makeTag(href, title, text), m.start(0), end

        link = self.resolver.resolve_reference(self.raw_label(label))
        if link is None:
            logger.debug("Unresolved cross-reference %r", label)
            return None, m.start(0), end
        return self.makeTag(link.url, link.title, text), m.start(0), end

    def raw_label(self, label: str) -> str:
        """Return ``label`` as written, with code spans and escapes restored."""
        label = self.unescape(label)
        return ESCAPED_CHAR_RE.sub(lambda m: chr(int(m.group(1))), label).strip()

    def evalId(  # noqa: N802
        self, data: str, index: int, text: str
    ) -> tuple[str | None, int, bool]:
        """Return the label following the link text, keeping its case."""
        match = self.RE_LINK.match(data, pos=index)
        if not match:
            return None, index, False
        return match.group(1) or text, match.end(0), True


class ShortCrossReferenceInlineProcessor(CrossReferenceInlineProcessor):
    """Handle shortcut ``[label]`` links, where the text is the label."""

    def evalId(  # noqa: N802
        self, data: str, index: int, text: str
    ) -> tuple[str | None, int, bool]:
        return text, index, True


__all__ = [
    "CrossReferenceExtension",
    "CrossReferenceInlineProcessor",
    "ShortCrossReferenceInlineProcessor",
]
