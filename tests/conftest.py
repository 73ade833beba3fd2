"""
Pytest configuration and fixtures for lolspeak tests.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Add src directory to Python path to allow importing lolspeak
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from lolspeak import Tranzlator, reset_default_tranzlator  # noqa: E402


TEST_DICTIONARY = {
    "hi": "oh hai",
    "cat": "kitteh",
    "i'm": "me",
    "your": "ur",
    "cheeseburger": "cheezeburger",
    "eating": "eating",
    "foobar": "f&#^bar",
}

LOLSPEAK_ENV_VARS = [
    "LOLSPEAK_DICTIONARY",
    "LOLSPEAK_HEURISTICS",
    "LOLSPEAK_TRACE",
    "LOLSPEAK_HEURISTICS_EXCLUDE",
    "LOLSPEAK_LOG_LEVEL",
]


@pytest.fixture
def lol_dictionary() -> dict[str, str]:
    """The word mapping written by the dictionary_file fixture."""
    return dict(TEST_DICTIONARY)


@pytest.fixture
def dictionary_file() -> Path:
    """Create a temporary YAML file with the test dictionary."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False, encoding="utf-8") as f:
        yaml.dump(TEST_DICTIONARY, f, allow_unicode=True)
        path = Path(f.name)

    yield path

    # Cleanup
    path.unlink()


@pytest.fixture
def tranzlator(dictionary_file: Path) -> Tranzlator:
    """Create a Tranzlator loaded with the test dictionary."""
    return Tranzlator.from_file(dictionary_file)


@pytest.fixture(autouse=True)
def reset_default():
    """Make sure no test leaks its default Tranzlator into the next."""
    reset_default_tranzlator()
    yield
    reset_default_tranzlator()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """Unset all LOLSPEAK_* variables and run from an empty directory.

    Setting before deleting registers each variable with monkeypatch, so
    anything a .env file loads during the test is removed afterwards.
    """
    for name in LOLSPEAK_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
