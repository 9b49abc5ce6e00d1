"""Tests for workspace configuration loading."""

import json

import pytest

from lollint.config import (
    DEFAULT_EXTENSIONS,
    ConfigError,
    discover_sources,
    load_config,
    locate_config_file,
)


class TestLoadConfig:
    """lollint.toml and .lollintrc handling."""

    def test_defaults_without_a_file(self, tmp_path):
        config = load_config(tmp_path)

        assert config.source is None
        assert config.scoping == "lexical"
        assert config.disable == []
        assert config.extensions == list(DEFAULT_EXTENSIONS)
        assert config.output.color is True

    def test_toml_file(self, tmp_path):
        (tmp_path / "lollint.toml").write_text(
            'scoping = "flat"\n'
            'disable = ["unused-variable"]\n'
            'extensions = ["lol", ".lolcode"]\n'
            "\n"
            "[output]\n"
            "stats = true\n"
            "color = false\n",
            encoding="utf-8",
        )

        config = load_config(tmp_path)

        assert config.source == tmp_path.resolve() / "lollint.toml"
        assert config.scoping == "flat"
        assert config.disable == ["unused-variable"]
        assert config.extensions == [".lol", ".lolcode"]
        assert config.output.stats is True
        assert config.output.color is False
        assert config.output.json is False

    def test_json_rc_file(self, tmp_path):
        (tmp_path / ".lollintrc").write_text(
            json.dumps({"disable": "empty-block", "output": {"json": True}}),
            encoding="utf-8",
        )

        config = load_config(tmp_path)

        assert config.disable == ["empty-block"]
        assert config.output.json is True

    def test_toml_wins_over_rc(self, tmp_path):
        (tmp_path / "lollint.toml").write_text('scoping = "flat"\n', encoding="utf-8")
        (tmp_path / ".lollintrc").write_text('{"scoping": "lexical"}', encoding="utf-8")
        assert load_config(tmp_path).scoping == "flat"

    def test_explicit_file(self, tmp_path):
        custom = tmp_path / "custom.toml"
        custom.write_text('scoping = "flat"\n', encoding="utf-8")
        assert load_config(tmp_path / "elsewhere", custom).scoping == "flat"

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            locate_config_file(tmp_path, tmp_path / "missing.toml")

    @pytest.mark.parametrize(
        "content, fragment",
        [
            ('scoping = "dynamic"\n', "scoping"),
            ('disable = ["no-such-rule"]\n', "Unknown rule"),
            ('disable = ["undeclared-variable"]\n', "cannot be disabled"),
            ("disable = 3\n", "list of strings"),
            ('output = "loud"\n', "table"),
            ("scoping = \n", "Invalid TOML"),
        ],
    )
    def test_invalid_toml(self, tmp_path, content, fragment):
        (tmp_path / "lollint.toml").write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError, match=fragment):
            load_config(tmp_path)

    def test_invalid_json(self, tmp_path):
        (tmp_path / ".lollintrc").write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(tmp_path)

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None, []])
    def test_output_flags_must_be_booleans_in_rc(self, tmp_path, value):
        (tmp_path / ".lollintrc").write_text(
            json.dumps({"output": {"color": value}}),
            encoding="utf-8",
        )
        with pytest.raises(ConfigError, match="'output.color' must be true or false"):
            load_config(tmp_path)

    def test_output_flags_must_be_booleans_in_toml(self, tmp_path):
        (tmp_path / "lollint.toml").write_text("[output]\nstats = 1\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="'output.stats' must be true or false"):
            load_config(tmp_path)


class TestDiscoverSources:
    """Directory expansion."""

    def test_directories_are_searched_recursively(self, write_lol, tmp_path):
        write_lol("b.lol", "HAI\nKTHXBYE\n")
        write_lol("nested/a.lols", "HAI\nKTHXBYE\n")
        write_lol("notes.txt", "not code")

        found = discover_sources([tmp_path], DEFAULT_EXTENSIONS)

        assert sorted(p.name for p in found) == ["a.lols", "b.lol"]

    def test_explicit_files_are_kept_regardless_of_suffix(self, write_lol):
        path = write_lol("program.txt", "HAI\nKTHXBYE\n")
        assert discover_sources([path], DEFAULT_EXTENSIONS) == [path]
