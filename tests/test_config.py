from postfeed.config import FeedConfig, Settings


def test_feed_defaults_match_global_feed_query() -> None:
    config = FeedConfig()

    assert config.search_view == "all"
    assert config.search_limit == 30
    assert config.pretty is True
    assert config.indent == "\t"


def test_feed_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("FEED_SEARCH_LIMIT", "50")
    monkeypatch.setenv("FEED_PRETTY", "false")
    monkeypatch.setenv("FEED_INDENT", "\\t\\t")

    config = FeedConfig()

    assert config.search_limit == 50
    assert config.pretty is False
    assert config.indent == "\t\t"


def test_settings_nests_sections() -> None:
    settings = Settings(feed=FeedConfig(search_limit=10))

    assert settings.feed.search_limit == 10
    assert settings.app.log_level == "INFO"


def test_feed_config_reads_env_file(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("FEED_SEARCH_LIMIT", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("FEED_SEARCH_LIMIT=12\nAPP_LOG_LEVEL=DEBUG\n", encoding="utf-8")

    settings = Settings()

    assert settings.feed.search_limit == 12
    assert settings.app.log_level == "DEBUG"
