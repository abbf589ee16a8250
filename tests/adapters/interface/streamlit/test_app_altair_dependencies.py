"""Tests for Streamlit Altair dependency checks."""

import sys
import types

import pytest

from household_finance.adapters.interface.streamlit import app


def test_check_altair_dependencies_ok(monkeypatch) -> None:
    monkeypatch.setitem(
        sys.modules,
        "numpy",
        types.SimpleNamespace(ndarray=object),
    )
    monkeypatch.setitem(
        sys.modules,
        "pandas",
        types.SimpleNamespace(Timestamp=object),
    )

    assert app._check_altair_dependencies() == (True, None)


@pytest.mark.parametrize(
    ("numpy_attrs", "pandas_attrs", "broken"),
    [
        ({}, {"Timestamp": object}, "numpy"),
        ({"ndarray": object}, {}, "pandas"),
    ],
)
def test_check_altair_dependencies_reports_incomplete_imports(
    monkeypatch,
    numpy_attrs,
    pandas_attrs,
    broken,
) -> None:
    """The broken library is named in the error message."""
    monkeypatch.setitem(
        sys.modules,
        "numpy",
        types.SimpleNamespace(**numpy_attrs),
    )
    monkeypatch.setitem(
        sys.modules,
        "pandas",
        types.SimpleNamespace(**pandas_attrs),
    )

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert broken in message
