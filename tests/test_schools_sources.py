import pytest

from spellbook.errors import UnknownSchool
from spellbook.schools import SCHOOLS, resolve_school
from spellbook.sources import PHB_ID, EE_ID, SCAG_ID, classify_source, trim_source_from_name

EXPECTED = {
    "A": "Abjuration", "C": "Conjuration", "D": "Divination", "EN": "Enchantment",
    "EV": "Evocation", "I": "Illusion", "N": "Necromancy", "T": "Transmutation",
}

def test_every_school_code_resolves():
    for code, full in EXPECTED.items():
        assert resolve_school(code) == full
    assert len(SCHOOLS) == 8

@pytest.mark.parametrize("code", ["", "E", "ev", " EV", "Evocation", "X"])
def test_unknown_school_code_raises(code):
    with pytest.raises(UnknownSchool) as exc:
        resolve_school(code)
    assert exc.value.code == code

def test_school_table_is_read_only():
    with pytest.raises(TypeError):
        SCHOOLS["X"] = "Xenomancy"

def test_resolve_school_with_injected_table():
    assert resolve_school("Z", {"Z": "Zap"}) == "Zap"

def test_source_from_suffix():
    assert classify_source("Fireball (EE)") == EE_ID
    assert trim_source_from_name("Fireball (EE)") == "Fireball"
    assert classify_source("Green-Flame Blade (SCAG)") == SCAG_ID
    assert trim_source_from_name("Green-Flame Blade (SCAG)") == "Green-Flame Blade"

def test_no_suffix_defaults_to_phb():
    assert classify_source("Fireball") == PHB_ID
    assert trim_source_from_name("Fireball") == "Fireball"

def test_scag_wins_when_both_markers_present():
    assert classify_source("Odd (EE) (SCAG)") == SCAG_ID
    assert trim_source_from_name("Odd (EE) (SCAG)") == "Odd"

def test_trim_is_idempotent():
    once = trim_source_from_name("Booming Blade (SCAG)")
    assert trim_source_from_name(once) == once

def test_marker_without_leading_space_still_classifies_but_is_not_trimmed():
    assert classify_source("Thing(EE)") == EE_ID
    assert trim_source_from_name("Thing(EE)") == "Thing(EE)"
