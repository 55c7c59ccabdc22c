"""
Pytest configuration and shared fixtures for the Flock test suite.

The sample sheet mirrors the real export: a header row, members from every
district, a photo-header artifact, a too-short name, a short row and an
unknown district.
"""
from pathlib import Path

import pytest

from flock.data.schemas import GraceBoundary, SheetLayout
from flock.data.store import RosterStore
from flock.data.tokenizer import tokenize
from flock.data.loader import build_records

SAMPLE_LINES = [
    "№,Район,ПІБ,Дати контактів,Примітки,Дії,Опіка,Служіння,Відвідування,Присутність,Вік,Стать,Дата народж.,Адрес,Телефон",
    '1,АЕРОПОРТ,Іваненко Петро Олексійович,"<b>05.12.2025</b>","Хворіє, потребує відвідування лікарні",,Так,Хор та молитовна група,Регулярно,90%,45,Ч,01.01.1980,"вул. Коновальця, 12",+380 50 123 4567',
    '2,КАСКАД,Сидоренко Ганна Михайлівна,01.10.2025 / 05.11.2025,,,Опіка,Молитовне,Рідко,50%,72,Ж,,"вул. Чорновола, 45",+380 67 987 6543',
    '3,ЦЕНТР,Мельник Василь Ігорович,99.99.2025,,,,Порядок,,100%,33,Ч,,"вул. Незалежності, 8",+380 93 456 7890',
    "4,ЦЕНТР 2,Коваль Олена Петрівна,15.12.25,,,,,,,29,Ж,,,",
    ",,ФОТО,,,,,,,,,,,,",
    "5,КАСКАД,Ася,01.12.2025,,,,,,,,,,,",
    "x,y",
    "6,ОБ'ЇЗНА,Бондар Іван,,,,,,,,,,,,",
    "7,НЕВІДОМО,Ткач Марія Іванівна,01.01.2024,,,,,,,,,,,",
]

# Source row indices of the rows that are real members
SAMPLE_MEMBER_IDS = [1, 2, 3, 4, 8, 9]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "api: marks tests that exercise the HTTP API")


@pytest.fixture
def sample_csv() -> str:
    return "\r\n".join(SAMPLE_LINES) + "\r\n\r\n"


@pytest.fixture
def boundary() -> GraceBoundary:
    return GraceBoundary(2025, 12)


@pytest.fixture
def layout() -> SheetLayout:
    return SheetLayout()


@pytest.fixture
def sample_rows(sample_csv):
    return tokenize(sample_csv)


@pytest.fixture
def sample_records(sample_rows, layout):
    return build_records(sample_rows, layout)


@pytest.fixture
def loaded_store(sample_csv, boundary) -> RosterStore:
    """A store that was fed the sample sheet; fetching is disabled."""
    def _no_fetch():
        raise AssertionError("network fetch not expected in this test")

    store = RosterStore(boundary=boundary, fetcher=_no_fetch)
    store.ingest_text(sample_csv, source="fixture")
    return store


@pytest.fixture
def sample_csv_file(tmp_path: Path, sample_csv) -> Path:
    path = tmp_path / "roster.csv"
    path.write_text(sample_csv, encoding="utf-8")
    return path
