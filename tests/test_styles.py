from __future__ import annotations

import pytest

from diaglines.diagnostic import Diagnostic, Severity
from diaglines.styles import (
    COC_PROFILE,
    DEFAULT_ICONS,
    NATIVE_PROFILE,
    IconSet,
    StyleProfile,
    get_profile,
    list_profiles,
    register_profile,
)


def test_builtin_lookup():
    assert get_profile() is NATIVE_PROFILE
    assert get_profile("native") is NATIVE_PROFILE
    assert get_profile(" COC ") is COC_PROFILE
    assert COC_PROFILE.style_for(Severity.ERROR) == "CocErrorVirtualText"


def test_unknown_source():
    with pytest.raises(KeyError):
        get_profile("nope")


def test_mappings_are_frozen():
    with pytest.raises(TypeError):
        NATIVE_PROFILE.severity_styles[Severity.ERROR] = "x"  # type: ignore[index]
    with pytest.raises(TypeError):
        DEFAULT_ICONS.icons[Severity.HINT] = "?"  # type: ignore[index]


def test_profile_needs_every_severity():
    with pytest.raises(ValueError):
        StyleProfile(name="partial", severity_styles={Severity.ERROR: "E"})


def test_string_keys_are_normalized():
    prof = StyleProfile(name="s", severity_styles={"error": "E", "warn": "W", "info": "I", "hint": "H"})
    assert prof.style_for(Severity.WARN) == "W"


def test_evolve_rejects_unknown_fields():
    with pytest.raises(KeyError):
        NATIVE_PROFILE.evolve(colour="red")


def test_register_profile_clones_base():
    prof = register_profile("Quiet", base="coc", overrides={"empty_style": "Normal"})
    assert prof.name == "quiet"
    assert prof.empty_style == "Normal"
    assert prof.severity_styles == COC_PROFILE.severity_styles
    assert get_profile("quiet") is prof
    assert "quiet" in list_profiles()


@pytest.mark.parametrize("name", ["native", "coc", "9lives", "has-dash"])
def test_register_profile_rejects_bad_names(name: str) -> None:
    with pytest.raises(ValueError):
        register_profile(name, base="native")


def test_icon_set_defaults_icon_styles():
    icons = IconSet(icons={s: s.value[0].upper() for s in Severity})
    assert icons.icon_for(Severity.INFO) == "I"
    assert icons.style_for(Severity.INFO) == "DiagnosticVirtualIconInfo"


# --- diagnostic model ----------------------------------------------------------

@pytest.mark.parametrize("level,sev", [(1, Severity.ERROR), (2, Severity.WARN), (3, Severity.INFO), (4, Severity.HINT)])
def test_severity_levels(level: int, sev: Severity) -> None:
    assert Severity.from_level(level) is sev
    assert sev.level == level


def test_unknown_level():
    with pytest.raises(ValueError):
        Severity.from_level(0)


@pytest.mark.parametrize("msg,blank", [("", True), ("   ", True), ("\t\n", True), (" x ", False)])
def test_blank_detection(msg: str, blank: bool) -> None:
    assert Diagnostic(0, 0, Severity.ERROR, msg).is_blank is blank


def test_display_text_with_code():
    assert Diagnostic(0, 0, Severity.ERROR, "oops", code="E1").display_text() == "E1: oops"
    assert Diagnostic(0, 0, Severity.ERROR, "oops").display_text() == "oops"
