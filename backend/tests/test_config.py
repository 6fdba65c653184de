import logging
from datetime import datetime, timedelta, timezone

import pytest

from courtscore.config import _canon_prefix, _table_name, parse_allowed_origins
from courtscore.time_utils import coerce_utc, naive_utc, require_utc
from courtscore.utils import sentry
from courtscore.utils.sentry import init_sentry, parse_sample_rate

pytestmark = pytest.mark.no_db


@pytest.mark.parametrize(
    "raw, expected",
    [(None, "/api"), ("", "/api"), ("api", "/api"), ("/api/", "/api"), ("/", "/")],
)
def test_canon_prefix(raw, expected):
    assert _canon_prefix(raw) == expected


def test_table_name_from_env(monkeypatch):
    monkeypatch.setenv("PLAYERS_TABLE", "court-score-players")
    assert _table_name("PLAYERS_TABLE", "x") == "court_score_players"
    monkeypatch.delenv("PLAYERS_TABLE")
    assert _table_name("PLAYERS_TABLE", "fallback") == "fallback"


def test_parse_allowed_origins():
    assert parse_allowed_origins(" http://a.test, ,http://b.test ") == [
        "http://a.test",
        "http://b.test",
    ]
    with pytest.raises(ValueError, match="must be set"):
        parse_allowed_origins(None)
    with pytest.raises(ValueError, match="at least one non-empty origin"):
        parse_allowed_origins(" , ")
    with pytest.raises(ValueError, match="wildcard"):
        parse_allowed_origins("http://a.test,*")


def test_parse_sample_rate(monkeypatch, caplog):
    monkeypatch.delenv("SENTRY_TRACES_SAMPLE_RATE", raising=False)
    assert parse_sample_rate("SENTRY_TRACES_SAMPLE_RATE", 0.5) == 0.5

    monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "0.25")
    assert parse_sample_rate("SENTRY_TRACES_SAMPLE_RATE") == 0.25

    with caplog.at_level(logging.WARNING):
        monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "lots")
        assert parse_sample_rate("SENTRY_TRACES_SAMPLE_RATE") == 0.0
        monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "-1")
        assert parse_sample_rate("SENTRY_TRACES_SAMPLE_RATE") == 0.0
    assert "not a valid float" in caplog.text
    assert "cannot be negative" in caplog.text


def test_sentry_disabled_without_dsn(monkeypatch):
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    assert init_sentry() is False


def test_sentry_init_reads_sample_rates(monkeypatch):
    calls = []
    monkeypatch.setattr(sentry.sentry_sdk, "init", lambda **kw: calls.append(kw))
    monkeypatch.setenv("SENTRY_DSN", "https://key@sentry.example/1")
    monkeypatch.setenv("SENTRY_ENVIRONMENT", " staging ")
    monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "0.2")
    monkeypatch.delenv("SENTRY_PROFILES_SAMPLE_RATE", raising=False)

    assert init_sentry() is True
    assert calls[0]["environment"] == "staging"
    assert calls[0]["traces_sample_rate"] == 0.2
    assert calls[0]["profiles_sample_rate"] == 0.0


def test_time_helpers():
    plus_two = timezone(timedelta(hours=2))
    aware = datetime(2024, 3, 2, 16, 30, tzinfo=plus_two)

    assert require_utc(aware) == datetime(2024, 3, 2, 14, 30, tzinfo=timezone.utc)
    with pytest.raises(ValueError, match="date must include a timezone offset"):
        require_utc(datetime(2024, 3, 2), field_name="date")

    naive = naive_utc(aware)
    assert naive == datetime(2024, 3, 2, 14, 30)
    assert naive.tzinfo is None
    assert coerce_utc(naive).tzinfo is timezone.utc
    assert naive_utc(None) is None
