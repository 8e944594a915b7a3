from dbjson.config import Settings, get_settings


def test_defaults(settings):
    assert settings.backend == "cli"
    assert settings.sqlite_binary == "sqlite3"
    assert settings.json_indent == 4
    assert settings.command_timeout is None
    assert settings.strict_reals is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DBJSON_BACKEND", "sqlalchemy")
    monkeypatch.setenv("DBJSON_JSON_INDENT", "2")
    monkeypatch.setenv("DBJSON_COMMAND_TIMEOUT", "1.5")

    settings = get_settings()

    assert settings.backend == "sqlalchemy"
    assert settings.json_indent == 2
    assert settings.command_timeout == 1.5


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("DBJSON_SQLITE_BINARY=/usr/local/bin/sqlite3\n")

    assert Settings(_env_file=env_file).sqlite_binary == "/usr/local/bin/sqlite3"
