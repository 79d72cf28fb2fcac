"""Markdown-to-HTML conversion for assistant replies."""

import html
import re

_CODE_BLOCK = re.compile(r"```(\w*)\n?([\s\S]*?)```")
_INLINE_CODE = re.compile(r"`([^`]+)`")
_BOLD = re.compile(r"\*\*(.+?)\*\*|__(.+?)__")
_ITALIC = re.compile(r"\*(?!\s)([^*\n]+?)\*|(?<!\w)_(?!\s)([^_\n]+?)_(?!\w)")
_LINK = re.compile(r"\[([^\]]+)\]\((https?://[^\s)]+)\)")
_BULLET = re.compile(r"^[-*]\s+")
_NUMBERED = re.compile(r"^\d+\.\s+")
_BLOCK_TAG = re.compile(r"^</?(ul|ol|li)\b")


def _wrap_lists(lines: list[str], marker: re.Pattern[str], tag: str, css: str) -> list[str]:
    """Group consecutive lines starting with ``marker`` into one HTML list."""
    result: list[str] = []
    in_list = False
    for line in lines:
        stripped = line.strip()
        if marker.match(stripped):
            if not in_list:
                result.append(f'<{tag} class="{css}">')
                in_list = True
            result.append(f"<li>{marker.sub('', stripped)}</li>")
            continue
        if in_list:
            result.append(f"</{tag}>")
            in_list = False
        result.append(line)
    if in_list:
        result.append(f"</{tag}>")
    return result


def _join_lines(lines: list[str]) -> str:
    """Join lines with <br>, except around list markup."""
    if not lines:
        return ""
    parts = [lines[0]]
    for prev, line in zip(lines, lines[1:]):
        if not (_BLOCK_TAG.match(prev) or _BLOCK_TAG.match(line)):
            parts.append("<br>")
        parts.append(line)
    return "".join(parts)


def markdown_to_html(text: str) -> str:
    """Convert a reply's simple markdown to HTML for the chat bubble.

    Supports: bold, italic, inline code, code blocks, links, lists.
    Only http(s) link targets become anchors; anything else stays text.
    """
    # Escape HTML entities first
    text = html.escape(text, quote=True)

    # Newlines inside code blocks become entities so the line pass leaves them alone
    text = _CODE_BLOCK.sub(
        lambda m: '<pre class="reply-code"><code>'
        + m.group(2).rstrip("\n").replace("\n", "&#10;")
        + "</code></pre>",
        text,
    )
    text = _INLINE_CODE.sub(r"<code>\1</code>", text)
    text = _BOLD.sub(lambda m: f"<strong>{m.group(1) or m.group(2)}</strong>", text)
    text = _ITALIC.sub(lambda m: f"<em>{m.group(1) or m.group(2)}</em>", text)
    text = _LINK.sub(r'<a href="\2" target="_blank">\1</a>', text)

    lines = text.split("\n")
    lines = _wrap_lists(lines, _BULLET, "ul", "list-disc list-inside my-1")
    lines = _wrap_lists(lines, _NUMBERED, "ol", "list-decimal list-inside my-1")

    return _join_lines(lines)
