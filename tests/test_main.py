"""Test the command-line entrypoint and Settings."""
from pathlib import Path

from pydantic import ValidationError
import pytest

from calculator_microservice import main as entrypoint
from calculator_microservice.common.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Keep CALCULATOR_* variables from the host out of the tests."""
    for name in ("CALCULATOR_HOST", "CALCULATOR_PORT", "CALCULATOR_LOG_DIR", "CALCULATOR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults() -> None:
    """The service binds all interfaces on port 3000 by default."""
    settings = Settings()
    assert str(settings.host) == "0.0.0.0"
    assert settings.port == 3000
    assert settings.log_dir == Path("logs")
    assert settings.log_level == "INFO"


def test_settings_invalid_ip() -> None:
    """Ensure invalid IP addresses raise a ValidationError."""
    with pytest.raises(ValidationError):
        Settings(host="999.999.999.999")


@pytest.mark.parametrize("port", [0, 70000])
def test_settings_invalid_port(port: int) -> None:
    """Ensure ports outside valid range raise a ValidationError."""
    with pytest.raises(ValidationError):
        Settings(port=port)


def test_settings_log_level_normalised() -> None:
    """Log levels are case-insensitive and must be known."""
    assert Settings(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    """Environment variables override defaults."""
    monkeypatch.setenv("CALCULATOR_PORT", "8080")
    monkeypatch.setenv("CALCULATOR_LOG_DIR", str(tmp_path))
    settings = Settings.from_env()
    assert settings.port == 8080
    assert settings.log_dir == tmp_path
    assert str(settings.host) == "0.0.0.0"


def test_parse_args_defaults() -> None:
    """No arguments yields the default settings."""
    assert entrypoint.parse_args([]) == Settings()


def test_parse_args_overrides_env(monkeypatch) -> None:
    """CLI arguments take precedence over the environment."""
    monkeypatch.setenv("CALCULATOR_PORT", "8080")
    settings = entrypoint.parse_args(["--port", "9090", "--host", "127.0.0.1", "--log-level", "warning"])
    assert settings.port == 9090
    assert str(settings.host) == "127.0.0.1"
    assert settings.log_level == "WARNING"


def test_parse_args_invalid_port() -> None:
    """Invalid values are reported through argparse."""
    with pytest.raises(SystemExit):
        entrypoint.parse_args(["--port", "70000"])


def test_main_runs_uvicorn(monkeypatch, tmp_path: Path, capsys) -> None:
    """main builds the app, logs the bound address and starts uvicorn."""
    calls = {}

    def fake_run(app, host, port):
        calls.update(app=app, host=host, port=port)

    monkeypatch.setattr(entrypoint.uvicorn, "run", fake_run)

    entrypoint.main(["--port", "3100", "--log-dir", str(tmp_path)])

    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 3100
    assert "Calculator service running at http://0.0.0.0:3100" in capsys.readouterr().out
    assert (tmp_path / "combined.log").exists()
