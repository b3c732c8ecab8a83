"""Detection of embedded images in Markdown bodies."""

from typing import Any, Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token

_parser = MarkdownIt("commonmark")


def iter_tokens(tokens: list[Token]) -> Iterator[Token]:
    """Yield every token in the stream, descending into nested children."""
    stack = list(reversed(tokens))
    while stack:
        token = stack.pop()
        yield token
        if token.children:
            stack.extend(reversed(token.children))


def is_any_image_in_markdown(body: Any) -> bool:
    """Return whether a Markdown body contains at least one image token.

    Absent, empty, or non-string bodies never contain an image.
    """
    if not isinstance(body, str) or not body.strip():
        return False
    return any(token.type == "image" for token in iter_tokens(_parser.parse(body)))
