"""Tests for configuration adapter."""

import pytest

from kmb_route_browser.adapters.config import AppConfig
from kmb_route_browser.adapters.config.app_config import KMB_API_BASE_URL
from kmb_route_browser.domain.models import Language, RouteMatchPolicy


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig.for_testing()

    assert config.host == "0.0.0.0"
    assert config.port == 8000
    assert config.kmb_api_base_url == KMB_API_BASE_URL
    assert config.kmb_api_timeout == 10
    assert config.title == "KMB Route Searcher"
    assert config.match_policy is RouteMatchPolicy.SUBSTRING
    assert config.language is Language.EN


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("KMB_API_TIMEOUT", "3")
    monkeypatch.setenv("ROUTE_MATCH_POLICY", "EXACT")
    monkeypatch.setenv("DEFAULT_LANGUAGE", "tc")

    config = AppConfig.for_testing()

    assert config.host == "127.0.0.1"
    assert config.port == 9000
    assert config.kmb_api_timeout == 3
    assert config.route_match_policy == "exact"
    assert config.match_policy is RouteMatchPolicy.EXACT
    assert config.language is Language.TC


def test_config_appends_trailing_slash_to_base_url() -> None:
    """Given a base URL without a trailing slash, when loading config, then one is appended."""
    config = AppConfig.for_testing(kmb_api_base_url="http://localhost:9999/kmb")

    assert config.kmb_api_base_url == "http://localhost:9999/kmb/"


def test_config_validates_route_match_policy() -> None:
    """Given an unknown match policy, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="route_match_policy must be either"):
        AppConfig.for_testing(route_match_policy="fuzzy")


def test_config_validates_default_language(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unsupported language, when loading config, then validation error is raised."""
    monkeypatch.setenv("DEFAULT_LANGUAGE", "fr")

    with pytest.raises(ValueError, match="default_language must be either"):
        AppConfig.for_testing()


def test_config_for_testing_ignores_env_file(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a .env file in the working directory, when using for_testing, then it is ignored."""
    (tmp_path / ".env").write_text("PORT=1234\nTITLE=From file\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert AppConfig().port == 1234
    config = AppConfig.for_testing()

    assert config.port == 8000
    assert config.title == "KMB Route Searcher"
