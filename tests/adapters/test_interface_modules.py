"""Ensure interface adapter packages expose the expected metadata."""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "household_finance.adapters.interface",
        "household_finance.adapters.interface.streamlit",
    ],
)
def test_interface_package_exports_are_empty(module_name) -> None:
    assert import_module(module_name).__all__ == []
