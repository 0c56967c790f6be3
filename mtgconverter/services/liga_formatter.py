"""
LigaMagic Want-List Formatter.

THIS MODULE HANDLES OUTPUT RENDERING ONLY.

Line format:
    <quantity> <card name>[ [QUALIDADE=<condition>]] [EDICAO=<edition>][ [EXTRAS=<extras>]]

The separator before the edition slot is always written, so a line with
the edition ignored keeps a trailing space before any extras tag.
"""

from collections.abc import Iterable

from mtgconverter.models.options import ConversionOptions
from mtgconverter.models.record import (
    CARD_NAME_FIELD,
    EDITION_FIELD,
    EXTRAS_FIELD,
    QUANTITY_FIELD,
    Record,
)


def render_line(record: Record, options: ConversionOptions) -> str:
    """
    Format a single record as a LigaMagic line.

    Args:
        record: Decoded CSV row
        options: Rendering options

    Returns:
        One output line, without a trailing newline
    """
    line = f"{record.get(QUANTITY_FIELD, '')} {record.get(CARD_NAME_FIELD, '')}"

    if options.force_condition:
        line += f" [QUALIDADE={options.condition.value}]"

    edition_tag = "" if options.ignore_edition else f"[EDICAO={record.get(EDITION_FIELD) or ''}]"
    line += f" {edition_tag}"

    extras = record.get(EXTRAS_FIELD)
    if extras and extras.strip():
        line += f" [EXTRAS={extras}]"

    return line


def render_all(records: Iterable[Record], options: ConversionOptions) -> str:
    """Format records as newline-separated LigaMagic lines, in input order."""
    return "\n".join(render_line(record, options) for record in records)
