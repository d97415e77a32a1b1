"""
Integration Tests — CLI and Logging
====================================
Runs main() end to end against JSON records and checks the centralised
logging setup. Handlers installed by a test are removed after it.
"""
import io
import json
import logging
import os

import pytest

import main
from failreport.core.constants import (
    GENERIC_ERROR_DOMAIN,
    INTERACTION_ERROR_DOMAIN,
    ErrorKey,
    InteractionErrorCode,
)
from failreport.utils.logging_config import ColoredFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def _write(tmp_path, payload) -> str:
    path = tmp_path / "record.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


NOT_FOUND = {
    "domain": INTERACTION_ERROR_DOMAIN,
    "code": InteractionErrorCode.ELEMENT_NOT_FOUND,
    "message": "Interaction cannot continue because the desired element was not found.",
    "element_matcher_description": "kindOfClass('UILabel')",
}


# ===========================================================================
# 1. CLI
# ===========================================================================
class TestCli:

    def test_structured_report_to_stdout(self, tmp_path, capsys):
        code = main.main([_write(tmp_path, NOT_FOUND)])
        out = capsys.readouterr().out
        assert code == main.EXIT_OK
        assert out == (
            "Interaction cannot continue because the desired element was not found.\n"
            "\n"
            "Element Matcher:\n"
            "kindOfClass('UILabel')\n"
        )

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(NOT_FOUND)))
        assert main.main(["-"]) == main.EXIT_OK
        assert "Element Matcher:" in capsys.readouterr().out

    def test_unsupported_category_uses_generic_dump(self, tmp_path, capsys):
        payload = {"domain": GENERIC_ERROR_DOMAIN, "code": 3, "message": "boom"}
        assert main.main([_write(tmp_path, payload)]) == main.EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("{\n")
        assert '"Description" : "boom"' in out

    def test_generic_failure_format(self, tmp_path, capsys):
        payload = dict(NOT_FOUND, file_path="Tests/A.m", line=7, ui_hierarchy_text="<UIWindow>")
        argv = [
            _write(tmp_path, payload),
            "--failure-name", "ElementNotFoundException",
            "--exclude", ErrorKey.FILE_PATH,
            "--exclude", ErrorKey.LINE,
        ]
        assert main.main(argv) == main.EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("Failure: ElementNotFoundException\n")
        assert "File:" not in out
        assert "Element Matcher:\nkindOfClass('UILabel')" in out
        assert out.count("<UIWindow>") == 1
        assert out.count("Legend:") == 1

    def test_generic_failure_format_hierarchy_once_without_exclusions(self, tmp_path, capsys):
        payload = dict(NOT_FOUND, ui_hierarchy_text="<UIWindow>")
        assert main.main([_write(tmp_path, payload), "--failure-name", "X"]) == main.EXIT_OK
        out = capsys.readouterr().out
        assert out.count("<UIWindow>") == 1
        assert "File:" not in out
        assert "Line:" not in out

    def test_generic_failure_format_unsupported_category_no_duplicates(self, tmp_path, capsys):
        payload = {
            "domain": GENERIC_ERROR_DOMAIN,
            "code": 3,
            "message": "boom",
            "stack_trace": ["frameA"],
            "ui_hierarchy_text": "<UIWindow>",
        }
        assert main.main([_write(tmp_path, payload), "--failure-name", "X"]) == main.EXIT_OK
        out = capsys.readouterr().out
        assert out.count("frameA") == 1
        assert out.count("<UIWindow>") == 1
        assert "Failure: X\n\nboom\n" in out

    def test_invalid_json_exits_2(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert main.main([str(path)]) == main.EXIT_INVALID_INPUT
        assert capsys.readouterr().out == ""

    def test_missing_field_exits_2(self, tmp_path):
        assert main.main([_write(tmp_path, {"domain": "D", "code": 0})]) == main.EXIT_INVALID_INPUT

    def test_missing_file_exits_2(self, tmp_path):
        assert main.main([str(tmp_path / "absent.json")]) == main.EXIT_INVALID_INPUT


# ===========================================================================
# 2. Logging setup
# ===========================================================================
class TestLoggingSetup:

    def test_console_only_by_default(self):
        setup_logging(level=logging.DEBUG)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ColoredFormatter)
        assert root.level == logging.DEBUG

    def test_file_handler_when_log_dir_given(self, tmp_path):
        log_dir = tmp_path / "logs"
        setup_logging(level=logging.INFO, log_dir=str(log_dir))
        root = logging.getLogger()
        assert len(root.handlers) == 2
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
        assert os.path.isdir(log_dir)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_colored_formatter_wraps_level_color(self):
        record = logging.LogRecord("failreport", logging.ERROR, __file__, 1, "boom", None, None)
        text = ColoredFormatter().format(record)
        assert text.startswith(ColoredFormatter.red)
        assert text.endswith(ColoredFormatter.reset)
        assert "boom" in text
