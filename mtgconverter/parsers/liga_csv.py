"""
Parser for LigaMagic collection CSV exports.

Expected header (extra columns are carried along untouched):
    Quantidade,Card (EN),Edicao (Sigla),Extras

Example:
    Quantidade,Card (EN),Edicao (Sigla),Extras
    4,Lightning Bolt,M21,foil
    2,Counterspell,MH2,
"""

import csv
import logging
from io import StringIO
from pathlib import PurePath

from mtgconverter.config import ACCEPTED_FILE_EXTENSIONS
from mtgconverter.models.errors import DecodeError
from mtgconverter.models.record import REQUIRED_FIELDS, Record, make_record

logger = logging.getLogger(__name__)

UTF8_BOM = "\ufeff"


def is_accepted_file_name(name: str) -> bool:
    """Check whether a file name carries an accepted export extension."""
    return PurePath(name).suffix.lower() in ACCEPTED_FILE_EXTENSIONS


def decode_or_raise(text: str, file_name: str = "<text>") -> list[Record]:
    """
    Decode CSV text into records, raising on malformed input.

    The first row names the fields. Lines whose cells are all blank are
    skipped; every other row must have exactly as many cells as the header.

    Args:
        text: Raw CSV content
        file_name: Name used in error messages

    Returns:
        Records in file order. Empty list if the input is empty/whitespace.

    Raises:
        DecodeError: If the header lacks a required column, a row has more or
            fewer cells than the header, or the CSV dialect cannot be read
    """
    if text.startswith(UTF8_BOM):
        text = text[len(UTF8_BOM) :]
    if not text.strip():
        return []

    reader = csv.DictReader(StringIO(text), strict=True)

    try:
        fieldnames = reader.fieldnames or []
        missing = [name for name in REQUIRED_FIELDS if name not in fieldnames]
        if missing:
            raise DecodeError(file_name, f"missing columns: {', '.join(missing)}")

        records: list[Record] = []
        for row in reader:
            # DictReader collects surplus cells under the None key
            if None in row:
                raise DecodeError(
                    file_name, f"row {reader.line_num} has more cells than the header"
                )
            if all(not (value or "").strip() for value in row.values()):
                continue
            # Short rows leave trailing fields as None
            if None in row.values():
                raise DecodeError(
                    file_name, f"row {reader.line_num} has fewer cells than the header"
                )
            records.append(make_record(row))
    except csv.Error as e:
        raise DecodeError(file_name, str(e)) from e

    return records


def decode(text: str) -> list[Record]:
    """
    Decode CSV text into records.

    Malformed input is logged and yields an empty list instead of raising.
    """
    try:
        return decode_or_raise(text)
    except DecodeError as e:
        logger.error("Error reading or parsing the CSV file: %s", e)
        return []
