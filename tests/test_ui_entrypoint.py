import sys

import pytest

from rhythm_trainer.ui import app


def test_main_without_pyside6_prints_install_hint(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setitem(sys.modules, "PySide6", None)
    monkeypatch.setitem(sys.modules, "PySide6.QtWidgets", None)

    assert app.main() == 1
    assert "pip install -e .[ui]" in capsys.readouterr().out
