import contextlib
import io
import logging
from argparse import Namespace

import pytest

from hangul_rules import cli
from hangul_rules.domain.sentence import KoreanSentence
from hangul_rules.services.examples_repository import ExamplesRepository
from hangul_rules.services.settings_store import SettingsStore


def _args(**kw) -> Namespace:
    base = {"text": None, "view": None, "examples": False, "debug": False, "settings": None}
    base.update(kw)
    return Namespace(**base)


def test_render_sections() -> None:
    out = cli.render(KoreanSentence("밥이"), ["roman", "hangul"])
    assert out == "[Roman]\nbabi\n[Hangul]\n밥이"


def test_run_prints_before_and_after(store: SettingsStore) -> None:
    out = io.StringIO()
    status = cli.run(_args(text="좋아요.", view=["hangul"]), store, out)
    assert status == 0
    assert out.getvalue() == "[Hangul]\n좋아요.\n[Hangul]\n조아요.\n"


def test_run_uses_settings(store: SettingsStore) -> None:
    store.save({"sentence": "합니다", "views": ["roman"]})
    out = io.StringIO()
    assert cli.run(_args(), store, out) == 0
    assert out.getvalue() == "[Roman]\nhabnida\n[Roman]\nhamnida\n"


def test_run_examples(store: SettingsStore) -> None:
    out = io.StringIO()
    assert cli.run(_args(examples=True, view=["hangul"]), store, out) == 0
    assert "바빔니다" in out.getvalue()


def test_lookup_error_sets_exit_status(store: SettingsStore, caplog: pytest.LogCaptureFixture) -> None:
    out = io.StringIO()
    with caplog.at_level(logging.ERROR, logger="hangul_rules.cli"):
        status = cli.run(_args(text="강아지", view=["roman"]), store, out)
    assert status == 1
    assert any("강아지" in r.getMessage() for r in caplog.records)


def test_main_parses_arguments(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    settings = tmp_path / "settings.yaml"
    status = cli.main(["--settings", str(settings), "--view", "roman", "--view", "jamo", "밥이"])
    assert status == 0
    printed = capsys.readouterr().out
    assert printed.startswith("[Roman]\nbabi\n[Jamo]\n")


def test_main_rejects_unknown_view() -> None:
    with pytest.raises(SystemExit):
        cli.main(["--view", "braille", "가"])


def test_run_writes_to_current_stdout(store: SettingsStore) -> None:
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        status = cli.run(_args(text="합니다", view=["hangul"]), store)
    assert status == 0
    assert buf.getvalue() == "[Hangul]\n합니다\n[Hangul]\n함니다\n"


def test_run_warns_when_no_examples(store: SettingsStore, tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    repo = ExamplesRepository(data_path=tmp_path / "examples.yaml")
    out = io.StringIO()
    with caplog.at_level(logging.WARNING, logger="hangul_rules.cli"):
        status = cli.run(_args(examples=True, view=["roman"]), store, out, repo)
    assert status == 0
    assert out.getvalue() == ""
    assert any("no examples found" in r.getMessage() for r in caplog.records)
