from __future__ import annotations

import pytest

from diaglines.config import RenderConfig
from diaglines.errors import CallContractError


def test_defaults():
    cfg = RenderConfig.from_options(None)
    assert cfg == RenderConfig(width=80, auto_width=False, highlight_whole_line=True)


def test_flat_mapping():
    cfg = RenderConfig.from_options({"width": 100, "auto_width": True})
    assert cfg.width == 100
    assert cfg.auto_width is True
    assert cfg.highlight_whole_line is True


def test_nested_editor_table():
    opts = {"virtual_text": False, "virtual_lines": {"highlight_whole_line": False}}
    cfg = RenderConfig.from_options(opts)
    assert cfg.highlight_whole_line is False
    assert cfg.width == 80


def test_nested_flag_true_means_defaults():
    assert RenderConfig.from_options({"virtual_lines": True}) == RenderConfig()


def test_instance_passes_through():
    cfg = RenderConfig(width=33)
    assert RenderConfig.from_options(cfg) is cfg


@pytest.mark.parametrize(
    "options",
    [
        {"width": "80"},
        {"auto_width": "yes"},
        {"colour": "red"},
        {"virtual_lines": 3},
        ["width", 80],
    ],
)
def test_invalid_options_are_contract_errors(options) -> None:  # type: ignore[no-untyped-def]
    with pytest.raises(CallContractError):
        RenderConfig.from_options(options)


def test_evolve_returns_copy():
    base = RenderConfig()
    wide = base.evolve(width=120)
    assert wide.width == 120
    assert base.width == 80


@pytest.mark.parametrize(
    "cfg,viewport,expected",
    [
        (RenderConfig(width=70), 200, 70),
        (RenderConfig(width=70, auto_width=True), 200, 190),
        (RenderConfig(width=70, auto_width=True), 25, 20),
        (RenderConfig(width=70, auto_width=True), None, 70),
    ],
)
def test_resolve_width(cfg: RenderConfig, viewport: int | None, expected: int) -> None:
    assert cfg.resolve_width(viewport) == expected
