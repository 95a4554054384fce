# Shared pytest fixtures
from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

from tokenmeta.config.loader import ENV_INPUT, ENV_OUTPUT_DIR, ENV_SCHEMA
from tokenmeta.logging.init import reset_logging

DEFAULT_HEADER = "SERIAL NUMBER,GRADER,TITLE,YEAR,LANGUAGE,SET,GRADE,video,image,external_url"
PRODUCT_HEADER = "TITLE,GRADER,SERIAL NUMBER,GRADE,YEAR,LANGUAGE,IMAGE URL,MP4 URL,URL TO PRODUCT"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for var in (ENV_INPUT, ENV_OUTPUT_DIR, ENV_SCHEMA):
        monkeypatch.delenv(var, raising=False)
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def write_csv(temp_workdir: Path) -> Callable[..., Path]:
    def _write(lines: list[str], name: str = "final.csv", header: str = DEFAULT_HEADER) -> Path:
        path = temp_workdir / "data" / name
        path.write_text("\n".join([header, *lines]) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def sample_rows() -> list[str]:
    return [
        '001,PSA,Charizard Holo,1999,English,Base Set,10,http://v/1.mp4,http://i/1.png,http://shop/1',
        '002,  BGS ,  Blastoise  ,2000,,Jungle,,,http://i/2.png,',
        '003,,"Pikachu, Illustrator",,Japanese,,,, http://i/3.png ,',
    ]


@pytest.fixture()
def sample_config_yaml() -> str:
    return """input_path: ./data/final.csv
output_directory: ./out
schema: default
indent: 2
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "generate.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def default_header() -> str:
    return DEFAULT_HEADER


@pytest.fixture()
def product_header() -> str:
    return PRODUCT_HEADER
