import pytest
from pydantic import ValidationError

from mapi_testkit.config import load_config


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "absent.yaml"))
    assert cfg.suites == []
    assert cfg.no_server is False
    assert cfg.report.line_len == 64
    assert cfg.report.junit is None


def test_yaml_values(tmp_path):
    path = tmp_path / "mapitest.yaml"
    path.write_text(
        "suites: [tests.sample_suites]\n"
        "no_server: true\n"
        "report:\n"
        "  line_len: 40\n"
        "  title_delim: '*'\n"
    )
    cfg = load_config(str(path))
    assert cfg.suites == ["tests.sample_suites"]
    assert cfg.no_server is True
    assert cfg.report.line_len == 40
    assert cfg.report.title_delim == "*"
    assert cfg.report.end_delim == "="


def test_empty_file(tmp_path):
    path = tmp_path / "mapitest.yaml"
    path.write_text("")
    assert load_config(str(path)).suites == []


def test_bad_line_len(tmp_path):
    path = tmp_path / "mapitest.yaml"
    path.write_text("report:\n  line_len: 0\n")
    with pytest.raises(ValidationError):
        load_config(str(path))
