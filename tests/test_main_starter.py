"""
Tests for the repository-root starter script
"""
import importlib.util
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def starter():
    """Load main.py from the repository root as a module"""
    spec = importlib.util.spec_from_file_location("console_demo_starter", ROOT / "main.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _fake_sys(major, minor, micro):
    return SimpleNamespace(
        version_info=SimpleNamespace(major=major, minor=minor, micro=micro),
        stderr=sys.stderr,
        path=list(sys.path),
    )


def test_rejects_old_python(starter, monkeypatch, capsys):
    """Test an interpreter below the minimum returns 1 with a message"""
    monkeypatch.setattr(starter, "sys", _fake_sys(3, 8, 18))

    assert starter.main([]) == 1
    captured = capsys.readouterr()
    assert captured.err.strip() == (
        "Unsupported Python runtime: 3.8.18. Use Python 3.9 or newer."
    )
    assert captured.out == ""


def test_accepts_new_python_without_upper_bound(starter, monkeypatch, capsys):
    """Test a future minor version still runs the program"""
    monkeypatch.setattr(starter, "sys", _fake_sys(3, 20, 0))

    assert starter.main([]) == 0
    assert capsys.readouterr().out.endswith("MyClass.MyMethod() was called\n")
