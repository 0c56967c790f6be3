"""
MTG Converter services.

Ingestion, conversion and session persistence.
"""

from mtgconverter.services.file_identity import identify
from mtgconverter.services.file_ingestion import FileIngestionStore
from mtgconverter.services.liga_formatter import render_all, render_line
from mtgconverter.services.options_reprocessor import (
    OptionsReprocessor,
    collect_included_records,
    reprocess,
)
from mtgconverter.services.session_store import SessionStore, migrate
from mtgconverter.services.workspace import ConverterWorkspace

__all__ = [
    "ConverterWorkspace",
    "FileIngestionStore",
    "OptionsReprocessor",
    "SessionStore",
    "collect_included_records",
    "identify",
    "migrate",
    "render_all",
    "render_line",
    "reprocess",
]
