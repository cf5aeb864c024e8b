"""Tests for env-file configuration loading."""

import pytest

from command_center.core import config as config_mod
from command_center.core.config import Settings


def test_parse_env_file_skips_comments_and_strips_quotes():
    parsed = config_mod._parse_env_file(
        """
        # comment
        GITHUB_TOKEN="abc"
        HF_TOKEN='def'
        BROKEN LINE
        =novalue
        PORT = 9000
        """
    )
    assert parsed == {"GITHUB_TOKEN": "abc", "HF_TOKEN": "def", "PORT": "9000"}


def test_settings_defaults():
    s = Settings(cfg={})
    assert s.GITHUB_API_URL == "https://api.github.com"
    assert s.GITHUB_DEFAULT_ORG == "BlackRoad-OS"
    assert s.STRIPE_API_URL == "https://api.stripe.com/v1"
    assert s.PORT == 8787
    assert s.UPSTREAM_TIMEOUT_SECONDS == 30.0
    assert s.sqlalchemy_database_uri.startswith("mysql+pymysql://root:@127.0.0.1:3306/db_command_center")


def test_database_url_wins_over_parts():
    s = Settings(cfg={"DATABASE_URL": "sqlite:///agents.db", "DB_HOST": "db"})
    assert s.sqlalchemy_database_uri == "sqlite:///agents.db"


def test_bad_int_falls_back_to_default():
    assert Settings(cfg={"PORT": "eighty"}).PORT == 8787


def test_configured_providers_reports_presence_only():
    s = Settings(cfg={"GITHUB_TOKEN": "x", "CLOUDFLARE_API_TOKEN": "y"})
    assert s.configured_providers() == {
        "github": True,
        "stripe": False,
        "huggingface": False,
        "cloudflare": False,
    }


def test_settings_read_from_config_path_env(tmp_path, monkeypatch):
    env_file = tmp_path / "cc.env"
    env_file.write_text("APP_NAME=from-file\nSTRIPE_SECRET_KEY=sk_file\n", encoding="utf-8")
    monkeypatch.setenv(config_mod.CONFIG_PATH_ENV, str(env_file))

    s = config_mod.load_settings()
    assert s.APP_NAME == "from-file"
    assert s.STRIPE_SECRET_KEY == "sk_file"


def test_missing_config_file_raises(tmp_path, monkeypatch):
    monkeypatch.setenv(config_mod.CONFIG_PATH_ENV, str(tmp_path / "absent.env"))
    with pytest.raises(FileNotFoundError):
        Settings()
