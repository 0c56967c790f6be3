import dataclasses

import pytest

from mtgconverter.models.errors import InvalidOptionError
from mtgconverter.models.file_entry import FileEntry
from mtgconverter.models.options import Condition, ConversionOptions
from mtgconverter.models.record import make_record


class TestCondition:
    def test_codes(self) -> None:
        assert [c.value for c in Condition] == ["nm", "sp", "mp", "hp", "dm"]

    def test_labels(self) -> None:
        assert Condition.NEAR_MINT.label == "Near Mint"
        assert Condition.DAMAGED.label == "Damaged"

    def test_parse_known_code(self) -> None:
        assert Condition.parse("sp") is Condition.SLIGHTLY_PLAYED

    def test_parse_rejects_unknown_code(self) -> None:
        with pytest.raises(InvalidOptionError):
            Condition.parse("mint")

    def test_parse_is_case_sensitive(self) -> None:
        """Codes are not coerced."""
        with pytest.raises(InvalidOptionError):
            Condition.parse("NM")


class TestConversionOptions:
    def test_defaults(self) -> None:
        options = ConversionOptions()

        assert options.condition is Condition.NEAR_MINT
        assert options.ignore_edition is False
        assert options.force_condition is False

    def test_plain_string_condition_normalized(self) -> None:
        options = ConversionOptions(condition="mp")  # type: ignore[arg-type]

        assert options.condition is Condition.MODERATELY_PLAYED

    def test_unknown_condition_rejected(self) -> None:
        with pytest.raises(InvalidOptionError):
            ConversionOptions(condition="excellent")  # type: ignore[arg-type]

    def test_non_boolean_flag_rejected(self) -> None:
        with pytest.raises(InvalidOptionError):
            ConversionOptions(ignore_edition="yes")  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        options = ConversionOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.force_condition = True  # type: ignore[misc]

    def test_to_dict_uses_stored_keys(self) -> None:
        options = ConversionOptions(condition=Condition.HEAVILY_PLAYED, force_condition=True)

        assert options.to_dict() == {
            "condition": "hp",
            "ignoreEdition": False,
            "forceCondition": True,
        }

    def test_from_dict(self) -> None:
        options = ConversionOptions.from_dict(
            {"condition": "dm", "ignoreEdition": True, "forceCondition": False}
        )

        assert options == ConversionOptions(condition=Condition.DAMAGED, ignore_edition=True)

    def test_from_dict_fills_defaults(self) -> None:
        assert ConversionOptions.from_dict({}) == ConversionOptions()

    def test_from_dict_rejects_unknown_condition(self) -> None:
        with pytest.raises(InvalidOptionError):
            ConversionOptions.from_dict({"condition": "xx"})


class TestFileEntry:
    def test_defaults(self) -> None:
        entry = FileEntry(id="a", name="a.csv")

        assert entry.records == ()
        assert entry.included is True
        assert entry.is_restored is False

    def test_toggled_returns_copy(self) -> None:
        entry = FileEntry(id="a", name="a.csv")

        toggled = entry.toggled()

        assert toggled.included is False
        assert entry.included is True

    def test_dict_round_trip(self) -> None:
        record = make_record({"Quantidade": "4", "Card (EN)": "Opt", "Edicao (Sigla)": "XLN"})
        entry = FileEntry(id="a", name="a.csv", records=(record,), included=False)

        assert FileEntry.from_dict(entry.to_dict()) == entry

    def test_from_dict_requires_record_list(self) -> None:
        with pytest.raises(ValueError):
            FileEntry.from_dict({"id": "a", "name": "a.csv"})

    def test_from_dict_rejects_non_string_values(self) -> None:
        with pytest.raises(ValueError):
            FileEntry.from_dict({"id": "a", "name": "a.csv", "records": [{"Quantidade": 4}]})

    def test_from_dict_rejects_non_boolean_included(self) -> None:
        with pytest.raises(ValueError):
            FileEntry.from_dict({"id": "a", "name": "a.csv", "records": [], "included": "yes"})
