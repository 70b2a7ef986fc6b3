"""
Tests for loader configuration
"""
import json
from pathlib import Path

import pytest

from stloader import LoaderConfig, ResourceAccessor, load_config
from stloader.config import DEFAULT_ERROR_ICON_PATH, DEFAULT_RESOURCE_PACKAGE


class TestLoaderConfig:

    def test_defaults(self):
        config = LoaderConfig()
        assert config.developer_mode is False
        assert config.program_dir == Path.cwd()
        assert config.home_dir == Path.home()
        assert config.resource_package == DEFAULT_RESOURCE_PACKAGE
        assert config.fallback_icon == DEFAULT_ERROR_ICON_PATH
        assert config.encoding == "utf-8"
        assert config.volume == 1.0

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            LoaderConfig().developer_mode = True

    def test_normalises_values(self, tmp_path):
        config = LoaderConfig(developer_mode=1, program_dir=str(tmp_path), volume=3)
        assert config.developer_mode is True
        assert config.program_dir == tmp_path
        assert config.volume == 1.0
        assert LoaderConfig(volume=-1).volume == 0.0


class TestLoadConfig:

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "absent.json") == LoaderConfig()

    def test_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"developer_mode": True, "home_dir": str(tmp_path), "volume": 0.3}))
        config = load_config(path)
        assert config.developer_mode is True
        assert config.home_dir == tmp_path
        assert config.volume == 0.3
        assert config.encoding == "utf-8"

    def test_unknown_keys_are_ignored(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"music_volume": 0.8}))
        with caplog.at_level("WARNING", logger="stloader"):
            assert load_config(path) == LoaderConfig()
        assert "music_volume" in caplog.text

    def test_non_object_document_gives_defaults(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps([1, 2, 3]))
        with caplog.at_level("WARNING", logger="stloader"):
            assert load_config(path) == LoaderConfig()
        assert "expected a JSON object" in caplog.text

    def test_keyword_overrides_win(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"developer_mode": True}))
        assert load_config(path, developer_mode=False).developer_mode is False
        assert load_config(path, developer_mode=None).developer_mode is True


class TestAccessorConfig:

    def test_keyword_options(self, tmp_path):
        accessor = ResourceAccessor(developer_mode=True, program_dir=tmp_path)
        assert accessor.developer_mode is True
        assert accessor.config.program_dir == tmp_path

    def test_config_and_options_conflict(self):
        with pytest.raises(TypeError):
            ResourceAccessor(LoaderConfig(), developer_mode=True)

    def test_instances_do_not_share_mode(self, tmp_path):
        strict = ResourceAccessor(program_dir=tmp_path, home_dir=tmp_path)
        lenient = ResourceAccessor(developer_mode=True, program_dir=tmp_path, home_dir=tmp_path)
        assert strict.developer_mode is False
        assert lenient.developer_mode is True
        assert strict.player is not lenient.player
