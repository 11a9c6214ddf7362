from pathlib import Path

import pytest
from pydantic import ValidationError

from zipweather.settings.user import DEFAULT_BASE_URL, UserSettings

GOOD_YAML = """
api_key: "${ZIPWEATHER_TEST_KEY}"
locations: ["06447", "02115"]
max_workers: 2
timezone: America/New_York
"""

BAD_YAML = """
api_key: short
"""


def test_defaults() -> None:
    cfg = UserSettings(api_key="abcdef123456")
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.locations == ["06447", "96801", "02115"]
    assert cfg.max_workers is None
    assert cfg.batch_timeout is None
    assert cfg.timezone is None


def test_load_interpolates_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZIPWEATHER_TEST_KEY", "abcdef123456")
    cfg_file = tmp_path / "good.yaml"
    cfg_file.write_text(GOOD_YAML)

    cfg = UserSettings.load(cfg_file)

    assert cfg.api_key == "abcdef123456"
    assert cfg.locations == ["06447", "02115"]
    assert cfg.max_workers == 2


def test_load_from_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_file = tmp_path / "cfg.yaml"
    cfg_file.write_text("api_key: abcdef123456\n")
    monkeypatch.setenv("ZIPWEATHER_CONFIG", str(cfg_file))
    assert UserSettings.load().api_key == "abcdef123456"


def test_missing_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZIPWEATHER_CONFIG", "/nonexistent/zipweather.yaml")
    with pytest.raises(FileNotFoundError):
        UserSettings.load()


def test_invalid_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text(BAD_YAML)
    with pytest.raises(RuntimeError):
        UserSettings.load(cfg_file)


def test_empty_config_is_missing_credential(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yaml"
    cfg_file.write_text("")
    with pytest.raises(RuntimeError, match="api_key"):
        UserSettings.load(cfg_file)


@pytest.mark.parametrize(
    "field, value",
    [
        ("timezone", "Mars/Olympus_Mons"),
        ("locations", ["06447", " "]),
        ("max_workers", 0),
        ("batch_timeout", 0),
        ("timeout", -1),
    ],
)
def test_field_validation(field: str, value: object) -> None:
    with pytest.raises(ValidationError):
        UserSettings(api_key="abcdef123456", **{field: value})
