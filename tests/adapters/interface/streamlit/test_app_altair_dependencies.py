"""Tests for the chart dependency check of the Streamlit app."""

import sys
import types

import pytest

from src.adapters.interface.streamlit import app


def _install(monkeypatch, numpy_attrs: dict, pandas_attrs: dict) -> None:
    monkeypatch.setitem(
        sys.modules, "numpy", types.SimpleNamespace(**numpy_attrs)
    )
    monkeypatch.setitem(
        sys.modules, "pandas", types.SimpleNamespace(**pandas_attrs)
    )


def test_dependencies_ok_when_modules_complete(monkeypatch) -> None:
    _install(monkeypatch, {"ndarray": object}, {"Timestamp": object})

    assert app._check_altair_dependencies() == (True, None)


@pytest.mark.parametrize(
    ("numpy_attrs", "pandas_attrs", "culprit"),
    [
        ({}, {"Timestamp": object}, "numpy"),
        ({"ndarray": object}, {}, "pandas"),
    ],
)
def test_dependencies_report_broken_module(
    monkeypatch, numpy_attrs, pandas_attrs, culprit
) -> None:
    """A partially imported module disables the charts."""
    _install(monkeypatch, numpy_attrs, pandas_attrs)

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert culprit in message
