"""
Convert CSV exports from the command line.

Reads one or more LigaMagic collection exports, skips duplicates the same
way the service does, and prints the converted want-list text.
"""

import argparse
import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from mtgconverter.models.errors import ReadError
from mtgconverter.models.file_entry import FileMeta
from mtgconverter.models.options import Condition, ConversionOptions
from mtgconverter.models.upload import ContentReader, NewUpload
from mtgconverter.parsers.liga_csv import is_accepted_file_name
from mtgconverter.services.file_ingestion import FileIngestionStore
from mtgconverter.services.options_reprocessor import reprocess

logger = logging.getLogger(__name__)


def _path_reader(path: Path) -> ContentReader:
    async def read() -> str:
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(path.name, str(e)) from e

    return read


def _candidate(path: Path) -> NewUpload:
    stat = path.stat()
    meta = FileMeta(name=path.name, last_modified=int(stat.st_mtime * 1000), size=stat.st_size)
    return NewUpload(meta=meta, read=_path_reader(path))


async def convert_paths(paths: Sequence[Path], options: ConversionOptions) -> str:
    """
    Ingest the given files and render their records.

    Args:
        paths: CSV exports to convert
        options: Rendering options

    Returns:
        Converted text for every file that could be read and decoded
    """
    candidates = []
    for path in paths:
        if not is_accepted_file_name(path.name):
            logger.warning("Skipping non-CSV file: %s", path)
            continue
        try:
            candidates.append(_candidate(path))
        except OSError as e:
            logger.error("Cannot access %s: %s", path, e)

    store = FileIngestionStore()
    await store.ingest(candidates)
    return reprocess(store.entries, options)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Convert collection CSVs to LigaMagic format")
    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="CSV exports to convert",
    )
    parser.add_argument(
        "--condition",
        default=Condition.NEAR_MINT.value,
        choices=[condition.value for condition in Condition],
        help="Condition grade used with --force-condition (default: nm)",
    )
    parser.add_argument(
        "--force-condition",
        action="store_true",
        help="Add a [QUALIDADE=...] tag to every line",
    )
    parser.add_argument(
        "--ignore-edition",
        action="store_true",
        help="Leave out the [EDICAO=...] tag",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    options = ConversionOptions(
        condition=Condition(args.condition),
        ignore_edition=args.ignore_edition,
        force_condition=args.force_condition,
    )
    print(asyncio.run(convert_paths(args.files, options)))


if __name__ == "__main__":
    main()
