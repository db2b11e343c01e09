"""Tests for the category-filtered debug logger."""

from __future__ import annotations

from typing import Iterator

import pytest

from n64map.memmap import resolve
from n64map.utils import debug_enabled, debug_log, reset_debug_categories


@pytest.fixture(autouse=True)
def _fresh_categories() -> Iterator[None]:
    reset_debug_categories()
    yield
    reset_debug_categories()


def test_debug_disabled_without_environment(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.delenv("N64MAP_DEBUG", raising=False)

    assert not debug_enabled("trace")
    debug_log("trace", "hidden")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_debug_category_filter(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("N64MAP_DEBUG", " Trace , cli")

    assert debug_enabled("trace")
    assert debug_enabled("CLI")
    assert not debug_enabled("resolve")
    assert debug_enabled()


def test_debug_all_enables_everything(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("N64MAP_DEBUG", "all")

    assert debug_enabled("resolve")


def test_debug_log_writes_to_stderr(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("N64MAP_DEBUG", "resolve")

    resolve(0xB000_0000)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[N64MAP][resolve] b0000000 -> 1P.CROM\n"


def test_debug_log_tolerates_bad_format_args(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("N64MAP_DEBUG", "all")

    debug_log("cli", "value %d", "text")

    assert capsys.readouterr().err == "[N64MAP][cli] value %d ('text',)\n"
