"""Interface adapter packages should not re-export anything."""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    "module_name",
    ["src.adapters.interface", "src.adapters.interface.streamlit"],
)
def test_interface_packages_have_empty_exports(module_name: str) -> None:
    assert import_module(module_name).__all__ == []
