"""Tests for errkit.output.console module."""

from __future__ import annotations

import pytest

from errkit.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


def test_style_str() -> None:
    assert str(Style.SUCCESS) == "success"
    assert str(Style.DIM) == "dim"


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_prefixes(self) -> None:
        console = MockConsole()
        console.success("done")
        console.error("failed")
        assert console.messages == ["OK done", "error: failed"]

    def test_helpers(self) -> None:
        console = MockConsole()
        console.header("Report")
        console.print("detail", Style.DIM)
        console.error("boom")
        assert console.has_error()
        assert console.text == "Report\ndetail\nerror: boom"
        assert [o.style for o in console.find("boom")] == [Style.ERROR]

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("x")


class TestRichConsole:
    def test_brackets_are_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("SocketError [Struct]")
        console.error("FileError [Class]")
        console.header("[bold]literal[/bold]")
        out = capsys.readouterr().out
        assert "SocketError [Struct]" in out
        assert "error: FileError [Class]" in out
        assert "[bold]literal[/bold]" in out

    def test_long_lines_are_not_wrapped(self, capsys: pytest.CaptureFixture[str]) -> None:
        line = "   └─ " + "x" * 200
        RichConsole().print(line)
        assert line in capsys.readouterr().out

    def test_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole(stderr=True).print("to stderr", Style.DIM)
        captured = capsys.readouterr()
        assert "to stderr" in captured.err
        assert captured.out == ""
