"""
Card record produced by the CSV decoder.

A record is one row of a LigaMagic collection export, keyed by the
export's header names. Records are read-only once decoded.
"""

from collections.abc import Mapping
from types import MappingProxyType

# Header names of the fixed export schema
QUANTITY_FIELD = "Quantidade"
CARD_NAME_FIELD = "Card (EN)"
EDITION_FIELD = "Edicao (Sigla)"
EXTRAS_FIELD = "Extras"

REQUIRED_FIELDS = (QUANTITY_FIELD, CARD_NAME_FIELD, EDITION_FIELD)

Record = Mapping[str, str]


def make_record(values: Mapping[str, str]) -> Record:
    """Freeze a row mapping into an immutable record."""
    return MappingProxyType(dict(values))
