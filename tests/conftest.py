"""Pytest fixtures shared by unit and integration tests."""

import json
import sys
from pathlib import Path

import pytest
from loguru import logger

PROJECT_ROOT = Path(__file__).parent.parent
FIXTURES_PATH = PROJECT_ROOT / "data" / "fixtures"
SUITE_CONFIG_PATH = PROJECT_ROOT / "config" / "fixture_suites.yaml"


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop sinks added during a test (CLI runs bind sinks to throwaway streams)."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def dogs_path() -> Path:
    return FIXTURES_PATH / "dogs.json"


@pytest.fixture
def landscapes_path() -> Path:
    return FIXTURES_PATH / "landscapes.json"


@pytest.fixture
def suite_config_path() -> Path:
    return SUITE_CONFIG_PATH


@pytest.fixture
def dogs(dogs_path) -> dict:
    with open(dogs_path, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def landscapes(landscapes_path) -> dict:
    with open(landscapes_path, "r", encoding="utf-8") as f:
        return json.load(f)


def make_dataset(*items: tuple) -> dict:
    """Build a dataset from (title, tags, date_taken) tuples."""
    return {
        "items": [
            {"title": title, "tags": tags, "date_taken": date_taken}
            for title, tags, date_taken in items
        ]
    }


@pytest.fixture
def small_dataset() -> dict:
    return make_dataset(
        ("Harbour at dusk", "Boats harbour sunset", "2016-06-26T19:10:00-08:00"),
        ("Old pier", "boats pier Świnoujście", "2015-03-01T08:00:00-08:00"),
        ("Gulls", "birds boats sunset", "2017-01-12T12:30:00-08:00"),
    )
