# tests/test_cli.py

import json
from datetime import datetime
from unittest.mock import patch

import pytest

from calpick import cli

@pytest.fixture
def config_file(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({
        "minDate": "2025-06-01",
        "maxDate": "2025-06-30",
        "disabledDaysOfWeek": [0, 6],
        "maxRange": 7,
        "rules": [{"from": "2025-06-14", "to": "2025-06-15", "disabledDaysOfWeek": []}],
    }), encoding="utf-8")
    return str(p)

def test_check_enabled(config_file, capsys):
    assert cli.main(["check", "2025-06-02", "--config", config_file]) == 0
    assert capsys.readouterr().out.strip() == "2025-06-02: enabled"

def test_check_disabled_prints_reasons(config_file, capsys):
    assert cli.main(["check", "2025-06-07", "--config", config_file]) == 1
    out = capsys.readouterr().out
    assert "2025-06-07: disabled" in out
    assert "  - This day of the week is not available" in out

def test_date_shortcut(config_file, capsys):
    assert cli.main(["2025-06-14", "--config", config_file]) == 0
    assert "enabled" in capsys.readouterr().out

def test_check_without_config(capsys):
    assert cli.main(["check", "1999-12-31"]) == 0

def test_check_debug_explains(config_file, capsys):
    assert cli.main(["check", "2025-06-14", "--config", config_file, "--debug"]) == 0
    out = capsys.readouterr().out
    assert "'rule': {'index': 0, 'priority': 0}" in out

def test_range(config_file, capsys):
    assert cli.main(["range", "2025-06-02", "2025-06-06", "--config", config_file]) == 0
    assert capsys.readouterr().out.strip() == "2025-06-02 .. 2025-06-06 (5 days): valid"
    assert cli.main(["range", "2025-06-02", "2025-06-10", "--config", config_file]) == 1
    assert "(9 days): invalid" in capsys.readouterr().out

def test_invalid_date_argument_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["check", "2025-02-30"])
    assert exc.value.code == 2
    assert "not a valid YYYY-MM-DD date" in capsys.readouterr().err

def test_bad_config_file(tmp_path, capsys):
    p = tmp_path / "bad.json"
    p.write_text("[]", encoding="utf-8")
    assert cli.main(["check", "2025-06-02", "--config", str(p)]) == 2
    assert capsys.readouterr().err.startswith("calpick: error:")
    assert cli.main(["check", "2025-06-02", "--config", str(tmp_path / "missing.json")]) == 2

def test_today(capsys):
    with patch("calpick.core.date._now", return_value=datetime(2025, 3, 12, 10, 0)):
        assert cli.main(["today", "--tz", "UTC"]) == 0
    assert capsys.readouterr().out.strip() == "2025-03-12"

def test_today_invalid_timezone(capsys):
    assert cli.main(["today", "--tz", "Nowhere/Special"]) == 2
    assert "Invalid timezone identifier" in capsys.readouterr().err

def test_pretty_month(config_file, capsys):
    assert cli.main(["pretty-month", "--config", config_file, "--month", "2025", "6"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "2025-06  (month open)"
    assert lines[1].startswith("Su")
    assert "xx" in out
    assert "..r0" in out

def test_pretty_month_disabled_month(config_file, capsys):
    assert cli.main(["pretty-month", "--config", config_file, "--month", "2025", "7", "--first-day", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "2025-07  (month disabled)"
    assert lines[1].startswith("Mo")

def test_verbose_flag_accepted(capsys):
    assert cli.main(["-v", "check", "2025-06-02"]) == 0

def test_malformed_config_values_do_not_crash(tmp_path, capsys):
    p = tmp_path / "odd.json"
    p.write_text(json.dumps({"disabledDaysOfWeek": 6, "rules": [{"months": 12}]}), encoding="utf-8")
    assert cli.main(["check", "2025-06-07", "--config", str(p)]) == 0
    assert "2025-06-07: enabled" in capsys.readouterr().out
