"""Macro argument splitting.

Arguments are separated by commas, except commas inside a quoted value
('a,b' or "a,b") or inside nested parentheses. Each argument keeps its
original text so callers can pass values through untouched.
"""

from dataclasses import dataclass

from template_resolver.scanning import QUOTES, iter_top_level


@dataclass(frozen=True)
class Argument:
    """One macro argument, whitespace-trimmed.

    start/end are offsets of the trimmed text within the argument string.
    """

    text: str
    start: int
    end: int

    @property
    def is_quoted(self) -> bool:
        return (
            len(self.text) >= 2
            and self.text[0] in QUOTES
            and self.text[-1] == self.text[0]
        )

    @property
    def unquoted(self) -> str:
        """The value with one pair of surrounding quotes removed."""
        if self.is_quoted:
            return self.text[1:-1]
        return self.text

    @property
    def is_blank(self) -> bool:
        return not self.text


def _trimmed(source: str, start: int, end: int) -> Argument:
    raw = source[start:end]
    leading = len(raw) - len(raw.lstrip())
    text = raw.strip()
    return Argument(text=text, start=start + leading, end=start + leading + len(text))


def split_arguments(source: str) -> list[Argument]:
    """Split macro argument text into arguments.

    Empty or whitespace-only text has no arguments. Otherwise N top-level
    commas give N + 1 arguments, blank ones included.

    >>> [a.text for a in split_arguments("col, 'a,b', c")]
    ['col', "'a,b'", 'c']
    """
    if not source.strip():
        return []

    arguments = []
    start = 0
    for index, char, depth in iter_top_level(source):
        if char == "," and depth <= 0:
            arguments.append(_trimmed(source, start, index))
            start = index + 1
    arguments.append(_trimmed(source, start, len(source)))
    return arguments
