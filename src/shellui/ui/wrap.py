"""Summary: Paragraph-aware greedy word wrapping for console output.
Why: Long help and description text must reflow to a fixed width with an indent."""

from __future__ import annotations

from shellui.ui.streams import WriteColor

PARAGRAPH_SEPARATOR = "\n\n"


def wrap_lines(text: str, width: int, indent: int) -> list[str]:
    """Reflow ``text`` into indented lines.

    Words are packed greedily; a line together with the separator following its
    last word never exceeds ``width - indent`` characters. Widths count
    characters, not encoded bytes. Each paragraph is followed by an empty line.

    Args:
        text: Free text, paragraphs separated by a blank line.
        width: Total line width, indent included.
        indent: Number of leading spaces on every non-empty line.

    Returns:
        list[str]: Lines without trailing newlines.
    """

    limit = width - indent
    prefix = " " * indent
    lines: list[str] = []
    for paragraph in text.split(PARAGRAPH_SEPARATOR):
        words: list[str] = []
        used = 0
        for word in paragraph.split():
            word_width = len(word)
            if words and used + word_width + 1 > limit:
                lines.append(prefix + " ".join(words))
                words = []
                used = 0
            used += word_width + 1
            words.append(word)
        if words:
            lines.append(prefix + " ".join(words))
        lines.append("")
    return lines


def wrap(text: str, width: int, indent: int) -> str:
    """Return ``text`` reflowed by ``wrap_lines`` as a newline-terminated string."""

    return "".join(f"{line}\n" for line in wrap_lines(text, width, indent))


def print_wrapped(stream: WriteColor, text: str, width: int, indent: int) -> None:
    """Write ``text`` reflowed to ``stream`` and flush it."""

    for line in wrap_lines(text, width, indent):
        _ = stream.write(f"{line}\n")
    stream.flush()


__all__ = ["PARAGRAPH_SEPARATOR", "print_wrapped", "wrap", "wrap_lines"]
