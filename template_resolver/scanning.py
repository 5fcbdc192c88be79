"""Quote-aware character scanning shared by the tokenizer and argument splitter."""

from collections.abc import Iterator

QUOTES = ("'", '"')


def iter_top_level(text: str, start: int = 0) -> Iterator[tuple[int, str, int]]:
    """Yield (index, char, depth) for characters outside quoted groups.

    depth counts parentheses opened since start. Characters inside a quoted
    group (including its quotes) are skipped; a backslash or a doubled quote
    does not close the group. An unterminated group runs to the end of text.
    """
    depth = 0
    quote: str | None = None
    i = start
    length = len(text)
    while i < length:
        char = text[i]
        if quote is not None:
            if char == "\\":
                i += 2
                continue
            if char == quote:
                if i + 1 < length and text[i + 1] == quote:
                    i += 2
                    continue
                quote = None
            i += 1
            continue
        if char in QUOTES:
            quote = char
            i += 1
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        yield i, char, depth
        i += 1
