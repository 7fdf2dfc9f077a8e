"""Unit tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest

from coursecatalog.config import (
    DEFAULT_CORS_ORIGINS,
    DEFAULT_PORT,
    AppConfig,
    ConfigError,
    load_config,
)


@pytest.mark.unit
class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self) -> None:
        config = AppConfig()

        assert config.db_path == "coursecatalog.db"
        assert config.port == DEFAULT_PORT
        assert config.cors_origins == DEFAULT_CORS_ORIGINS

    def test_from_dict(self) -> None:
        config = AppConfig.from_dict(
            {"db_path": "data/catalog.db", "port": 9000, "cors_origins": ["http://x"]}
        )

        assert config.db_path == "data/catalog.db"
        assert config.port == 9000
        assert config.cors_origins == ["http://x"]

    def test_from_dict_unknown_field(self) -> None:
        with pytest.raises(ConfigError, match="databse"):
            AppConfig.from_dict({"databse": "typo.db"})

    def test_from_dict_bad_port(self) -> None:
        with pytest.raises(ConfigError, match="port"):
            AppConfig.from_dict({"port": "eighty"})

    def test_from_dict_bad_origins(self) -> None:
        with pytest.raises(ConfigError):
            AppConfig.from_dict({"cors_origins": "http://x"})

    def test_env_overrides(self) -> None:
        config = AppConfig().with_env_overrides(
            {"COURSECATALOG_DB_PATH": "env.db", "COURSECATALOG_PORT": "9100"}
        )

        assert config.db_path == "env.db"
        assert config.port == 9100


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config."""

    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yaml"
        path.write_text("db_path: from-file.db\nhost: 0.0.0.0\nlog_level: DEBUG\n")

        with patch.dict("os.environ", {}, clear=True):
            config = load_config(path)

        assert config.db_path == "from-file.db"
        assert config.host == "0.0.0.0"
        assert config.log_level == "DEBUG"

    def test_env_beats_file(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yaml"
        path.write_text("db_path: from-file.db\n")

        with patch.dict("os.environ", {"COURSECATALOG_DB_PATH": "from-env.db"}):
            config = load_config(path)

        assert config.db_path == "from-env.db"

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")

        with patch.dict("os.environ", {}, clear=True):
            assert load_config(path) == AppConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("db_path: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)
