"""Tests for YAMLConfigLoader."""

import pytest

from webmud.infrastructure.config import YAMLConfigLoader


class TestYAMLConfigLoader:
    """Tests for loading raw YAML data."""

    def test_missing_file_returns_empty(self, tmp_path):
        """Test a missing file means defaults."""
        loader = YAMLConfigLoader(tmp_path / "missing.yaml")
        assert loader.load() == {}

    def test_empty_file_returns_empty(self, tmp_path):
        """Test an empty document means defaults."""
        path = tmp_path / "webmud.yaml"
        path.write_text("", encoding="utf-8")
        assert YAMLConfigLoader(path).load() == {}

    def test_loads_mapping(self, tmp_path):
        """Test nested sections are loaded as dicts."""
        path = tmp_path / "webmud.yaml"
        path.write_text(
            "transport:\n  url: ws://mud.example.org:8000/ws\noutput:\n  msg_limit: 10\n",
            encoding="utf-8",
        )

        data = YAMLConfigLoader(path).load()

        assert data["transport"]["url"] == "ws://mud.example.org:8000/ws"
        assert data["output"]["msg_limit"] == 10

    def test_non_mapping_root_rejected(self, tmp_path):
        """Test a list document is an error."""
        path = tmp_path / "webmud.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            YAMLConfigLoader(path).load()

    def test_path_property(self, tmp_path):
        """Test configured path is exposed."""
        path = tmp_path / "x.yaml"
        assert YAMLConfigLoader(path).path == path
