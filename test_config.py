from config import DEFAULT_JOKE, ServerConfig


def test_defaults(monkeypatch):
    for var in ("CHAT_HOST", "CHAT_PORT", "LOG_LEVEL", "CHAT_JOKE_TEXT", "CHAT_RELOAD"):
        monkeypatch.delenv(var, raising=False)

    config = ServerConfig.from_env()
    assert config.host == "0.0.0.0"
    assert config.port == 8000
    assert config.log_level == "INFO"
    assert config.joke_text == DEFAULT_JOKE
    assert config.reload is False


def test_from_env(monkeypatch):
    monkeypatch.setenv("CHAT_HOST", "127.0.0.1")
    monkeypatch.setenv("CHAT_PORT", "9001")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CHAT_JOKE_TEXT", "a better joke")
    monkeypatch.setenv("CHAT_RELOAD", "true")

    config = ServerConfig.from_env()
    assert config.host == "127.0.0.1"
    assert config.port == 9001
    assert config.log_level == "DEBUG"
    assert config.joke_text == "a better joke"
    assert config.reload is True
