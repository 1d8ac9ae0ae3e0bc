"""Markdown conversion and title extraction on top of mistune."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from html import unescape
from typing import Any, Literal

import mistune

from ..core.models import UNTITLED

EventKind = Literal["start", "end", "text"]

# Raw HTML in the markdown is passed through untouched.
_html = mistune.create_markdown(escape=False)
_ast = mistune.create_markdown(renderer="ast")


@dataclass(frozen=True)
class MarkdownEvent:
    """One step of a document walk: entering or leaving a node, or plain text."""

    kind: EventKind
    node: str
    text: str = ""
    attrs: dict[str, Any] = field(default_factory=dict)

    def is_heading_start(self, level: int) -> bool:
        return (
            self.kind == "start"
            and self.node == "heading"
            and self.attrs.get("level") == level
        )


def markdown_to_html(markdown: str) -> str:
    """Convert markdown source to an HTML fragment."""
    return _html(markdown)


def _walk(tokens: Iterable[dict[str, Any]]) -> Iterator[MarkdownEvent]:
    for token in tokens:
        node = token["type"]
        if node == "text":
            yield MarkdownEvent("text", node, text=unescape(token.get("raw", "")))
            continue
        attrs = token.get("attrs") or {}
        yield MarkdownEvent("start", node, text=token.get("raw", ""), attrs=attrs)
        yield from _walk(token.get("children") or ())
        yield MarkdownEvent("end", node, attrs=attrs)


def iter_events(markdown: str) -> Iterator[MarkdownEvent]:
    """Parse markdown and yield its events in document order.

    Every node other than plain text produces a ``start`` and an ``end``
    event around the events of its children, so inline formatting shows up
    as its own event rather than as text.
    """
    tokens = _ast(markdown)
    return _walk(tokens)


def extract_title(markdown: str) -> str:
    """Return the text of the first level-1 heading, or ``"Untitled"``.

    Only the first level-1 heading is looked at. When the event right after
    its start is not plain text (emphasis, code, an empty heading) the result
    is ``"Untitled"``, even if a later heading would qualify.
    """
    events = iter_events(markdown)
    for event in events:
        if event.is_heading_start(1):
            following = next(events, None)
            if following is not None and following.kind == "text":
                return following.text
            return UNTITLED
    return UNTITLED
