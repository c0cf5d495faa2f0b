from rifa.backend.config import load_settings


def test_load_settings_reads_expected_env(monkeypatch) -> None:
    monkeypatch.setenv("RIFA_HOST", "0.0.0.0")
    monkeypatch.setenv("RIFA_PORT", "9000")

    settings = load_settings()

    assert settings.host == "0.0.0.0"
    assert settings.port == 9000


def test_load_settings_applies_defaults(monkeypatch) -> None:
    monkeypatch.delenv("RIFA_HOST", raising=False)
    monkeypatch.delenv("RIFA_PORT", raising=False)

    settings = load_settings()

    assert settings.host == "127.0.0.1"
    assert settings.port == 4000
