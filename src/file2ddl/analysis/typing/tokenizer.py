"""Quote-aware line tokenizer.

Splits one raw line into fields. With a quote mode active, every occurrence
of the quote character toggles the "inside quote" state and is dropped from
the output; delimiters inside a quoted span are kept as data. There is no
escaping: a doubled quote is two toggles, and an unterminated quote simply
runs to the end of the line.
"""

from __future__ import annotations

from file2ddl.core.models.base import QuoteMode


def split_fields(
    line: str, delimiter: str, quote_mode: QuoteMode | str = QuoteMode.NONE
) -> list[str]:
    """Split a line into fields.

    Args:
        line: Raw line without its line terminator
        delimiter: Single-character field separator
        quote_mode: Which quote character, if any, suppresses splitting

    Returns:
        Ordered list of field strings
    """
    quote = QuoteMode(quote_mode).quote_char
    if quote is None:
        return line.split(delimiter)

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == quote:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields
