"""Split a query template into literal text and macro invocations.

A macro starts with `$__` followed by a name of letters, digits and
underscores. If the name is immediately followed by `(` and the macro takes
arguments, everything up to the matching `)` is the argument text.
Parentheses inside quotes don't count, and nested parentheses are allowed.
Macros that take no arguments never consume a `(`; it stays plain text.
"""

import logging
import re
from collections.abc import Callable

from core import MacroInvocation, Span, TextSpan
from template_resolver.scanning import iter_top_level

logger = logging.getLogger(__name__)

MACRO_PREFIX = "$__"
_MACRO_START = re.compile(r"\$__([A-Za-z0-9_]+)")

# Decides from a macro name whether a following "(" opens its argument list
ArgumentPredicate = Callable[[str], bool]


class Tokenizer:
    """Tokenizes regions of one template.

    Matching parentheses are remembered per template, so every `(` is
    scanned at most once no matter how many macros start at or around it.
    """

    def __init__(self, template: str, takes_arguments: ArgumentPredicate | None = None):
        self.template = template
        self._takes_arguments = takes_arguments
        self._closing: dict[int, int | None] = {}

    def closing_paren(self, open_index: int) -> int | None:
        """Index of the `)` matching the `(` at open_index, or None."""
        if open_index in self._closing:
            return self._closing[open_index]

        opened: list[int] = []
        for index, char, _depth in iter_top_level(self.template, open_index):
            if char == "(":
                opened.append(index)
            elif char == ")":
                self._closing[opened.pop()] = index
                if not opened:
                    return index

        # Nothing after these can close them either
        for index in opened:
            self._closing[index] = None
        return None

    def spans(self, start: int = 0, end: int | None = None) -> list[Span]:
        """Tokenize template[start:end] into an ordered list of spans.

        Joining the source text of every span gives back the region.
        A macro whose `(` is not closed inside the region is kept as
        literal text.
        """
        template = self.template
        if end is None:
            end = len(template)

        spans: list[Span] = []
        pos = text_start = start

        while True:
            match = _MACRO_START.search(template, pos, end)
            if match is None:
                break

            name = match.group(1)
            macro_start = match.start()
            name_end = match.end()
            arguments = None
            macro_end = name_end

            if (
                name_end < end
                and template[name_end] == "("
                and (self._takes_arguments is None or self._takes_arguments(name))
            ):
                close = self.closing_paren(name_end)
                if close is None or close >= end:
                    logger.debug(
                        "[TOKENIZE] Unterminated arguments for %s%s at %d",
                        MACRO_PREFIX,
                        name,
                        macro_start,
                    )
                    pos = name_end
                    continue
                arguments = template[name_end + 1 : close]
                macro_end = close + 1

            if macro_start > text_start:
                spans.append(
                    TextSpan(template[text_start:macro_start], text_start, macro_start)
                )
            spans.append(
                MacroInvocation(
                    name=name,
                    arguments=arguments,
                    start=macro_start,
                    end=macro_end,
                    text=template[macro_start:macro_end],
                )
            )
            pos = text_start = macro_end

        if text_start < end:
            spans.append(TextSpan(template[text_start:end], text_start, end))

        return spans


def tokenize(template: str, takes_arguments: ArgumentPredicate | None = None) -> list[Span]:
    """Tokenize a whole template into an ordered list of spans.

    Args:
        template: Query text with $__ macros
        takes_arguments: Which macro names may consume a `(...)` argument
            list (None = every macro)

    Returns:
        TextSpan and MacroInvocation spans covering the template
    """
    return Tokenizer(template, takes_arguments).spans()
