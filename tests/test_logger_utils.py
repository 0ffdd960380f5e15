# tests/test_logger_utils.py
import pytest

from sentence_synth.utils.logger_utils import Log


def test_time_block_records_duration(tmp_path):
    Log.set_default_path(str(tmp_path / "logs" / "run.log"))
    with Log.time_block("work") as t:
        sum(range(1000))
    assert t.duration >= 0.0
    text = (tmp_path / "logs" / "run.log").read_text(encoding="utf-8")
    assert "work done:" in text and text.rstrip().endswith("s")


def test_time_block_marks_failures(tmp_path):
    Log.set_default_path(str(tmp_path / "run.log"))
    with pytest.raises(ZeroDivisionError):
        with Log.time_block("broken"):
            1 / 0
    assert "broken failed:" in (tmp_path / "run.log").read_text(encoding="utf-8")


def test_metric_appends(tmp_path):
    Log.set_default_path(str(tmp_path / "m.log"))
    Log.metric("sentences", 3)
    Log.metric("latency", 0.5, "s")
    lines = (tmp_path / "m.log").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("sentences: 3")
    assert lines[1].endswith("latency: 0.5s")
