import pytest

from tests.helpers.crawler_imports import config_module, load_configuration

ENV_KEYS = [
    "HEADLESS",
    "ERROR_LOG_PATH",
    "REPORT_PATH",
    "WAIT_UNTIL",
    "NAVIGATION_TIMEOUT_MS",
    "MAX_PAGES",
]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setattr(config_module, "load_dotenv", lambda *_args, **_kwargs: False)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_load_configuration_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    config = load_configuration(" https://example.com/ ")

    assert config.seed_url == "https://example.com/"
    assert config.error_log_path == (tmp_path / "error_log.txt").resolve()
    assert config.report_path is None
    assert config.headless is True
    assert config.wait_until == "networkidle"
    assert config.navigation_timeout_ms == 30000
    assert config.max_pages == 0


def test_load_configuration_uses_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("HEADLESS", "false")
    monkeypatch.setenv("ERROR_LOG_PATH", str(tmp_path / "errors.txt"))
    monkeypatch.setenv("REPORT_PATH", str(tmp_path / "report.json"))
    monkeypatch.setenv("WAIT_UNTIL", "DOMContentLoaded")
    monkeypatch.setenv("NAVIGATION_TIMEOUT_MS", "5000")
    monkeypatch.setenv("MAX_PAGES", "25")

    config = load_configuration("https://example.com")

    assert config.headless is False
    assert config.error_log_path == (tmp_path / "errors.txt").resolve()
    assert config.report_path == (tmp_path / "report.json").resolve()
    assert config.wait_until == "domcontentloaded"
    assert config.navigation_timeout_ms == 5000
    assert config.max_pages == 25


def test_load_configuration_rejects_unknown_wait_condition(monkeypatch):
    monkeypatch.setenv("WAIT_UNTIL", "networkidle0")

    with pytest.raises(ValueError):
        load_configuration("https://example.com")
