# tests/test_utils.py - config, metrics and log helpers
import json

import pytest

from adaptive_autocompleter.utils.config_manager import DEFAULTS, Config
from adaptive_autocompleter.utils.logger_utils import Log
from adaptive_autocompleter.utils.metrics_tracker import Metrics, SearchAnalytics


def test_config_defaults_and_file_merge(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_suggestions": 5, "unknown": 1}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("max_suggestions") == 5
    assert cfg.get("recent_limit") == DEFAULTS["recent_limit"]
    assert "unknown" not in cfg.data


def test_config_bad_json_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf8")
    assert Config(str(path)).data == DEFAULTS


def test_config_set_coerces_and_saves(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert cfg.set("show_scores", "false")
    assert cfg.set("seed_max_age_seconds", "60")
    assert not cfg.set("max_suggestions", "many")
    assert not cfg.set("nope", "1")
    saved = json.loads(path.read_text(encoding="utf8"))
    assert saved["show_scores"] is False
    assert saved["seed_max_age_seconds"] == 60.0


def test_metrics_running_sums():
    m = Metrics()
    assert m.avg("x") == 0.0
    m.record("x", 2)
    m.record("x", 4)
    assert m.avg("x") == pytest.approx(3.0)
    assert m.count("x") == 2


def test_search_analytics_snapshot():
    a = SearchAnalytics()
    for ms in (10, 20, 30):
        a.record_search(ms)
    a.record_new_term()
    snap = a.snapshot()
    assert snap.total_searches == 3
    assert snap.average_latency_ms == pytest.approx(20.0)
    assert snap.new_terms_learned == 1


def test_log_writes_file_lazily(tmp_path, capsys):
    path = tmp_path / "deep" / "app.log"
    log = Log(path=str(path), use_color=False)
    log.warning("careful")
    assert "WARNING | careful" in path.read_text(encoding="utf-8")
    assert "careful" in capsys.readouterr().out


def test_time_block_records_metric(tmp_path, capsys):
    with Log.time_block("work", path=str(tmp_path / "m.log")) as t:
        pass
    assert t.elapsed >= 0
    assert "work done" in (tmp_path / "m.log").read_text(encoding="utf-8")


def test_metric_writes_to_given_path_only(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    Log.metric("latency", 1.5, "ms", path=str(tmp_path / "a.log"))
    Log.metric("latency", 2.5, "ms")
    assert "latency: 1.5ms" in (tmp_path / "a.log").read_text(encoding="utf-8")
    assert "latency: 2.5ms" in (tmp_path / "logs" / "autocompleter.log").read_text(encoding="utf-8")
    assert not hasattr(Log, "metric_path")
