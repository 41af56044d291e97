from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app

JAPAN = {
    "code": "JP",
    "nameEnglish": "Japan",
    "nameLocal": "日本",
    "region": "Asia-Pacific",
    "visaRequirement": "Visa-free",
    "stayDays": "90",
}

RECORDS = [
    JAPAN,
    {
        "code": "FR",
        "nameEnglish": "France",
        "nameLocal": "法國",
        "region": "Europe",
        "visaRequirement": "Visa-free (Schengen)",
        "stayDays": "90",
        "fee": "None",
    },
    {
        "code": "DE",
        "nameEnglish": "Germany",
        "nameLocal": "德國",
        "region": "Europe",
        "visaRequirement": "Visa-free (Schengen)",
    },
    {
        "code": "US",
        "nameEnglish": "United States",
        "region": "Americas",
        "visaRequirement": "ESTA",
    },
]

REFERENCES = [
    {"code": "JP", "name_en": "Japan", "name_zh": "日本"},
    {"code": "VN", "name_en": "Vietnam", "name_zh": "越南"},
]


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def make_client(tmp_path: Path, records, references=None, **overrides) -> TestClient:
    countries_path = None
    if references is not None:
        countries_path = write_json(tmp_path / "countries.json", references)
    settings = Settings(
        visa_data_path=write_json(tmp_path / "visa.json", records),
        countries_data_path=countries_path,
        **overrides,
    )
    return TestClient(create_app(settings))


@pytest.fixture()
def client(tmp_path: Path) -> TestClient:
    return make_client(tmp_path, RECORDS, REFERENCES)


@pytest.fixture()
def japan_client(tmp_path: Path) -> TestClient:
    """Only the Japan record and no reference table."""
    return make_client(tmp_path, [JAPAN])


@pytest.fixture()
def degraded_client(tmp_path: Path) -> TestClient:
    return make_client(tmp_path, [], REFERENCES)
