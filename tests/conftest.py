from collections.abc import Callable

import pytest

from mtgconverter.models.file_entry import FileMeta
from mtgconverter.models.record import make_record
from mtgconverter.models.upload import NewUpload


@pytest.fixture
def sample_csv() -> str:
    """Sample LigaMagic collection export for testing."""
    return """Quantidade,Card (EN),Edicao (Sigla),Extras
4,Lightning Bolt,M21,foil
2,Counterspell,MH2,
1,Fire // Ice,MH2,"foil,promo"
"""


@pytest.fixture
def bolt_record():
    return make_record(
        {
            "Quantidade": "4",
            "Card (EN)": "Lightning Bolt",
            "Edicao (Sigla)": "M21",
            "Extras": "foil",
        }
    )


@pytest.fixture
def make_upload(sample_csv: str) -> Callable[..., NewUpload]:
    """Build an upload candidate whose reader returns the given text."""

    def _make(
        name: str = "collection.csv",
        last_modified: int = 1000,
        size: int = 100,
        text: str | None = None,
    ) -> NewUpload:
        content = sample_csv if text is None else text

        async def read() -> str:
            return content

        return NewUpload(meta=FileMeta(name, last_modified, size), read=read)

    return _make
