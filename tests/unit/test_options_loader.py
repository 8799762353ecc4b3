"""Tests for themeconv.yaml loading and saving."""

from pathlib import Path

import pytest

from themeconv.core.errors import OptionsError
from themeconv.core.ir import DEFAULT_NAMESPACE, ConversionOptions, DarkModeStrategy
from themeconv.core.options_loader import (
    get_options_path,
    load_options,
    options_file_exists,
    save_options,
)


class TestLoadOptions:
    def test_missing_file_uses_defaults(self, tmp_path: Path):
        assert not options_file_exists(tmp_path)
        options = load_options(tmp_path)

        assert options.dark_mode_strategy == DarkModeStrategy.AUTO
        assert options.include_comments is True
        assert options.namespace == DEFAULT_NAMESPACE

    def test_missing_file_without_defaults_raises(self, tmp_path: Path):
        with pytest.raises(OptionsError, match="not found"):
            load_options(tmp_path, use_defaults=False)

    def test_loads_values(self, tmp_path: Path):
        get_options_path(tmp_path).write_text(
            "dark_mode_strategy: none\ninclude_comments: false\nnamespace: MyApp.Resources\n"
        )
        options = load_options(tmp_path)

        assert options == ConversionOptions(
            dark_mode_strategy=DarkModeStrategy.NONE,
            include_comments=False,
            namespace="MyApp.Resources",
        )

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path):
        get_options_path(tmp_path).write_text("namespace: Brand.Theme\n")
        options = load_options(tmp_path)

        assert options.namespace == "Brand.Theme"
        assert options.dark_mode_strategy == DarkModeStrategy.AUTO

    def test_empty_file_uses_defaults(self, tmp_path: Path):
        get_options_path(tmp_path).write_text("")
        assert load_options(tmp_path) == ConversionOptions()

    def test_invalid_yaml(self, tmp_path: Path):
        get_options_path(tmp_path).write_text("namespace: [unclosed\n")
        with pytest.raises(OptionsError, match="Invalid YAML"):
            load_options(tmp_path)

    def test_unknown_strategy(self, tmp_path: Path):
        get_options_path(tmp_path).write_text("dark_mode_strategy: sometimes\n")
        with pytest.raises(OptionsError, match="Invalid conversion options"):
            load_options(tmp_path)

    def test_not_a_mapping(self, tmp_path: Path):
        get_options_path(tmp_path).write_text("- auto\n- none\n")
        with pytest.raises(OptionsError, match="Expected a mapping"):
            load_options(tmp_path)


def test_save_then_load(tmp_path: Path):
    options = ConversionOptions(dark_mode_strategy=DarkModeStrategy.MANUAL, namespace="X.Y")
    path = save_options(tmp_path, options)

    assert path == tmp_path / "themeconv.yaml"
    assert "dark_mode_strategy: manual" in path.read_text()
    assert load_options(tmp_path) == options


def test_save_creates_directory(tmp_path: Path):
    path = save_options(tmp_path / "nested" / "config", ConversionOptions())
    assert path.exists()


def test_save_unwritable_raises(tmp_path: Path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file in the way")

    with pytest.raises(OptionsError, match="Cannot write"):
        save_options(blocker, ConversionOptions())
