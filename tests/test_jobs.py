"""Tests for the command-line converter."""

from pathlib import Path

import pytest

from mtgconverter.jobs.convert_files import convert_paths, main
from mtgconverter.models.options import Condition, ConversionOptions


@pytest.fixture
def csv_file(tmp_path: Path, sample_csv: str) -> Path:
    path = tmp_path / "binder.csv"
    path.write_text(sample_csv, encoding="utf-8")
    return path


class TestConvertPaths:
    async def test_converts_file(self, csv_file: Path) -> None:
        text = await convert_paths([csv_file], ConversionOptions())

        assert text.splitlines()[0] == "4 Lightning Bolt [EDICAO=M21] [EXTRAS=foil]"

    async def test_same_file_twice_converted_once(self, csv_file: Path) -> None:
        text = await convert_paths([csv_file, csv_file], ConversionOptions())

        assert len(text.splitlines()) == 3

    async def test_skips_non_csv_and_missing(self, tmp_path: Path, csv_file: Path) -> None:
        notes = tmp_path / "notes.txt"
        notes.write_text("hello", encoding="utf-8")

        text = await convert_paths(
            [notes, tmp_path / "missing.csv", csv_file], ConversionOptions()
        )

        assert len(text.splitlines()) == 3

    async def test_options_applied(self, csv_file: Path) -> None:
        options = ConversionOptions(condition=Condition.SLIGHTLY_PLAYED, force_condition=True)

        text = await convert_paths([csv_file], options)

        assert "[QUALIDADE=sp]" in text.splitlines()[0]

    async def test_undecodable_file_left_out(self, tmp_path: Path, csv_file: Path) -> None:
        latin = tmp_path / "latin.csv"
        latin.write_bytes("Quantidade,Card (EN),Edicao (Sigla)\n1,L\xe2mina,M21\n".encode("latin-1"))

        text = await convert_paths([latin, csv_file], ConversionOptions())

        assert len(text.splitlines()) == 3
        assert "Lightning Bolt" in text


class TestMain:
    def test_prints_converted_text(
        self, csv_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main([str(csv_file), "--ignore-edition", "--force-condition", "--condition", "hp"])

        out = capsys.readouterr().out
        assert out.splitlines()[0] == "4 Lightning Bolt [QUALIDADE=hp]  [EXTRAS=foil]"

    def test_rejects_unknown_condition(self, csv_file: Path) -> None:
        with pytest.raises(SystemExit):
            main([str(csv_file), "--condition", "mint"])
