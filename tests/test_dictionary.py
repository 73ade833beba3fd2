"""
Unit tests for loading and sorting dictionary files.
"""

from pathlib import Path

import pytest
import yaml

from lolspeak import DictionaryLoadError, LolspeakError, Tranzlator
from lolspeak.dictionary import dump_dictionary, load_dictionary, sort_dictionary_file, yaml_quote


class TestLoadDictionary:
    """Test reading YAML dictionaries."""

    def test_load(self, dictionary_file: Path, lol_dictionary: dict[str, str]) -> None:
        """Test loading a flat mapping."""
        assert load_dictionary(dictionary_file) == lol_dictionary

    def test_load_missing_file(self) -> None:
        """Test a missing file raises DictionaryLoadError."""
        with pytest.raises(DictionaryLoadError, match="Failed to read") as exc_info:
            load_dictionary(Path("/nonexistent/tranzlator.yml"))
        assert exc_info.value.details["path"] == "/nonexistent/tranzlator.yml"

    def test_from_file_missing(self) -> None:
        """Test no Tranzlator is created from a missing file."""
        with pytest.raises(LolspeakError):
            Tranzlator.from_file("/nonexistent/tranzlator.yml")

    def test_load_malformed_yaml(self, tmp_path: Path) -> None:
        """Test YAML syntax errors raise DictionaryLoadError."""
        path = tmp_path / "bad.yml"
        path.write_text("hi: [oh hai\n", encoding="utf-8")
        with pytest.raises(DictionaryLoadError, match="Invalid YAML"):
            load_dictionary(path)

    def test_load_not_a_mapping(self, tmp_path: Path) -> None:
        """Test a top-level list is rejected."""
        path = tmp_path / "list.yml"
        path.write_text("- hi\n- cat\n", encoding="utf-8")
        with pytest.raises(DictionaryLoadError, match="must be a mapping"):
            load_dictionary(path)

    def test_load_nested_values(self, tmp_path: Path) -> None:
        """Test nested values are rejected."""
        path = tmp_path / "nested.yml"
        path.write_text("hi:\n  en: hello\n", encoding="utf-8")
        with pytest.raises(DictionaryLoadError, match="must be strings"):
            load_dictionary(path)

    def test_load_unquoted_boolean(self, tmp_path: Path) -> None:
        """Test keys YAML reads as booleans are rejected."""
        path = tmp_path / "bool.yml"
        path.write_text("yes: yus\n", encoding="utf-8")
        with pytest.raises(DictionaryLoadError):
            load_dictionary(path)

    def test_load_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file is an empty dictionary."""
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_dictionary(path) == {}


class TestYamlQuote:
    """Test minimal YAML quoting."""

    def test_bare_words(self) -> None:
        """Test plain alphabetic words stay bare."""
        assert yaml_quote("kitteh") == "kitteh"
        assert yaml_quote("Cheezburger") == "Cheezburger"

    def test_quoted(self) -> None:
        """Test anything else is double-quoted."""
        assert yaml_quote("oh hai") == '"oh hai"'
        assert yaml_quote("i'm") == '"i\'m"'
        assert yaml_quote("2") == '"2"'
        assert yaml_quote("") == '""'

    def test_reserved_words(self) -> None:
        """Test booleans and null are quoted in any case."""
        for word in ["yes", "No", "TRUE", "false", "on", "Off", "null"]:
            assert yaml_quote(word) == f'"{word}"'

    def test_escapes(self) -> None:
        """Test quotes and backslashes are escaped."""
        assert yaml_quote('say "hi"') == '"say \\"hi\\""'
        assert yaml_quote("a\\b") == '"a\\\\b"'


class TestDumpDictionary:
    """Test sorted dictionary output."""

    def test_sorted_lines(self) -> None:
        """Test entries come out one per line, sorted by key."""
        text = dump_dictionary({"hi": "oh hai", "cat": "kitteh", "i'm": "me"})
        assert text == 'cat: kitteh\nhi: "oh hai"\n"i\'m": me\n'

    def test_reloads_identically(self) -> None:
        """Test the dump reads back as the same mapping."""
        dictionary = {
            "yes": "yus",
            "too": "2",
            "cat’s": "kitteh’s",
            "quote": 'say "hi"',
            "no": "noes",
        }
        assert yaml.safe_load(dump_dictionary(dictionary)) == dictionary

    def test_sort_dictionary_file(self, dictionary_file: Path, tmp_path: Path, lol_dictionary: dict[str, str]) -> None:
        """Test sorting a file writes the sorted text."""
        destination = tmp_path / "sorted.yml"
        text = sort_dictionary_file(dictionary_file, destination)

        assert destination.read_text(encoding="utf-8") == text
        assert load_dictionary(destination) == lol_dictionary
        keys = [line.split(":")[0].strip('"') for line in text.splitlines()]
        assert keys == sorted(lol_dictionary)

    def test_sort_dictionary_file_no_destination(self, dictionary_file: Path) -> None:
        """Test the sorted text is returned without writing."""
        text = sort_dictionary_file(dictionary_file)
        assert text.startswith("cat: kitteh\n")
