"""Tests for structlog configuration and the console renderer."""

import json

from musicat_i18n.logging import ConsoleRenderer, configure_logging, get_logger, is_configured


class TestConsoleRenderer:
    def test_plain_line(self) -> None:
        renderer = ConsoleRenderer(colors=False)
        line = renderer(
            None,
            "info",
            {"event": "Loaded locale bundle", "timestamp": "12:00:00", "locale": "zh", "keys": 3},
        )
        assert line == "i18n   | 12:00:00 | info  | Loaded locale bundle locale=zh keys=3"

    def test_private_keys_hidden(self) -> None:
        renderer = ConsoleRenderer(colors=False)
        line = renderer(None, "debug", {"event": "x", "timestamp": "t", "_record": object()})
        assert line == "i18n   | t | debug | x"

    def test_colors(self) -> None:
        renderer = ConsoleRenderer(colors=True)
        line = renderer(None, "error", {"event": "boom", "timestamp": "t", "ok": False})
        assert "\033[" in line
        assert "boom" in line

    def test_exception_is_appended(self) -> None:
        renderer = ConsoleRenderer(colors=False)
        try:
            raise KeyError("sidebar")
        except KeyError:
            line = renderer(None, "error", {"event": "failed", "timestamp": "t", "exc_info": True})
        assert line.startswith("i18n   | t | error | failed\n")
        assert "KeyError: 'sidebar'" in line


class TestConfigureLogging:
    def test_level_filtering_to_stderr(self, capsys) -> None:
        configure_logging(level="INFO", colors=False)
        assert is_configured()
        log = get_logger("tests")
        log.info("Checked locale bundle", locale="zh", errors=0)
        log.debug("hidden detail")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Checked locale bundle" in captured.err
        assert "locale=zh errors=0" in captured.err
        assert "logger_name=tests" in captured.err
        assert "hidden detail" not in captured.err

    def test_json_output(self, capsys) -> None:
        configure_logging(level="DEBUG", json_output=True)
        get_logger().warning("语言包已加载", locale="zh")

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "语言包已加载"
        assert record["level"] == "warning"
        assert record["locale"] == "zh"

    def test_force_color_is_honored(self, capsys, monkeypatch) -> None:
        monkeypatch.setenv("FORCE_COLOR", "1")
        configure_logging(level="INFO")
        get_logger("tests").info("colored")
        assert "\033[" in capsys.readouterr().err

    def test_no_color_without_tty(self, capsys, monkeypatch) -> None:
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        configure_logging(level="INFO")
        get_logger("tests").info("plain")
        assert "\033[" not in capsys.readouterr().err
