import importlib


def reload_settings():
    import conlog.settings as settings
    return importlib.reload(settings)


def test_defaults(monkeypatch):
    for var in ("CONLOG_DEBUG_MODE", "CONLOG_TIME_FORMAT", "CONLOG_MAX_LINE_SIZE"):
        monkeypatch.delenv(var, raising=False)
    settings = reload_settings()
    assert settings.settings == settings.Settings(
        debug_mode=False, time_format="%Y/%m/%d %H:%M:%S", max_line_size=0
    )


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("CONLOG_DEBUG_MODE", "true")
    monkeypatch.setenv("CONLOG_TIME_FORMAT", "%H:%M:%S")
    monkeypatch.setenv("CONLOG_MAX_LINE_SIZE", "120")
    settings = reload_settings()
    assert settings.settings.debug_mode is True
    assert settings.settings.time_format == "%H:%M:%S"
    assert settings.settings.max_line_size == 120


def test_bad_values_fall_back(monkeypatch, caplog):
    monkeypatch.setenv("CONLOG_DEBUG_MODE", "maybe")
    monkeypatch.setenv("CONLOG_MAX_LINE_SIZE", "lots")
    with caplog.at_level("ERROR", logger="conlog"):
        settings = reload_settings()
    assert settings.settings.debug_mode is False
    assert settings.settings.max_line_size == 0
    assert "CONLOG_DEBUG_MODE" in caplog.text
    assert "CONLOG_MAX_LINE_SIZE" in caplog.text


def test_negative_line_size_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("CONLOG_MAX_LINE_SIZE", "-5")
    with caplog.at_level("ERROR", logger="conlog"):
        settings = reload_settings()
    assert settings.settings.max_line_size == 0
    assert "is negative" in caplog.text
