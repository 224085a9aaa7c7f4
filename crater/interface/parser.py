#!/usr/bin/env python3
# crater/interface/parser.py
from __future__ import annotations

"""
Line tokenizer.

Rules:
- Space, tab, CR, LF and BEL separate words outside double quotes.
- A double quote opens a quoted run in which delimiters are literal; the
  quote characters themselves are dropped.
- A closing quote ends the word and must be followed by a delimiter or the
  end of the line.
- Empty words are never produced.

There is no escape character and single quotes are ordinary characters.
"""

from crater.errors import ParseError

DELIMITERS = frozenset(" \t\r\n\a")
QUOTE = '"'


def is_delimiter(char: str) -> bool:
    return char in DELIMITERS


def _finish_token(buffer: list[str], tokens: list[str]) -> None:
    if buffer:
        tokens.append("".join(buffer))
        buffer.clear()


def tokenize(line: str) -> list[str]:
    """
    Split `line` into words, honoring double-quote grouping.

    Examples:
        'echo "hello world" foo' -> ['echo', 'hello world', 'foo']
        '   '                    -> []

    Raises:
        ParseError: unterminated quote, or a closing quote glued to more text.
    """
    tokens: list[str] = []
    buffer: list[str] = []
    in_quotes = False
    length = len(line)
    index = 0

    while index < length:
        char = line[index]

        if char == QUOTE:
            if not in_quotes:
                in_quotes = True
                index += 1
                continue

            following = index + 1
            if following < length and not is_delimiter(line[following]):
                raise ParseError("Expected delimiter after end quote.",
                                 line=line, position=following)
            in_quotes = False
            _finish_token(buffer, tokens)
            # skip the closing quote and the delimiter after it
            index += 2
            continue

        if in_quotes or not is_delimiter(char):
            buffer.append(char)
        else:
            _finish_token(buffer, tokens)
        index += 1

    if in_quotes:
        raise ParseError("Parsing ended unexpectedly.", line=line, position=length)

    _finish_token(buffer, tokens)
    return tokens
