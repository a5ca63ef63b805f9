import dataclasses
import pytest

from spellbook.errors import UnknownClass, UnknownSchool, MalformedComponents
from spellbook.features import normalize, to_tables
from spellbook.models import RawEntry
from spellbook.sources import SCAG_ID, PHB_ID

def test_end_to_end(produce_flame):
    spell, classes = normalize(produce_flame)
    assert spell.name == "Produce Flame"
    assert spell.school == "Evocation"
    assert spell.ritual is False
    assert (spell.comp_verbal, spell.comp_somatic, spell.comp_material) == (True, True, False)
    assert spell.material_desc is None
    assert spell.source_id == SCAG_ID
    assert spell.level == "0"
    assert spell.cast_time == "1 action"
    assert spell.range == "Self"
    assert spell.duration == "10 minutes"
    assert spell.description == "A small flame..."
    assert spell.concentration is False
    assert [c.name for c in classes] == ["Druid", "Warlock"]

def test_ritual_token_must_be_exact(produce_flame):
    assert normalize(dataclasses.replace(produce_flame, ritual="YES"))[0].ritual is True
    for token in ["yes", "YES ", "Y", "true"]:
        assert normalize(dataclasses.replace(produce_flame, ritual=token))[0].ritual is False

def test_unknown_school_aborts(produce_flame):
    with pytest.raises(UnknownSchool):
        normalize(dataclasses.replace(produce_flame, school="Q"))

def test_unknown_class_aborts(produce_flame):
    bad = dataclasses.replace(produce_flame, classes="Druid, Necromancer, Warlock")
    with pytest.raises(UnknownClass) as exc:
        normalize(bad)
    assert exc.value.names == ["Necromancer"]
    assert exc.value.raw == "Druid, Necromancer, Warlock"

def test_strict_components(produce_flame):
    broken = dataclasses.replace(produce_flame, components="V, M (a candle")
    assert normalize(broken)[0].material_desc == "A candl"
    with pytest.raises(MalformedComponents):
        normalize(broken, strict_components=True)

def test_injected_tables():
    entry = RawEntry(name="Zap", school="Z", classes="Zapper", components="V")
    spell, classes = normalize(entry, schools={"Z": "Zapping"}, classes={"Zapper": "zapper-record"})
    assert spell.school == "Zapping"
    assert spell.source_id == PHB_ID
    assert classes == ["zapper-record"]

def test_to_tables(produce_flame):
    converted = [normalize(produce_flame), normalize(dataclasses.replace(produce_flame, name="Other", classes="Wizard"))]
    tables = to_tables(converted)
    spells, links = tables["spells"], tables["class_spells"]
    assert list(spells["row_id"]) == [0, 1]
    assert list(spells["name"]) == ["Produce Flame", "Other"]
    assert list(links["row_id"]) == [0, 0, 1]
    assert list(links["class_slug"]) == ["druid", "warlock", "wizard"]

def test_to_tables_empty():
    tables = to_tables([])
    assert tables["spells"].empty and "school" in tables["spells"].columns
    assert list(tables["class_spells"].columns) == ["row_id", "class_id", "class_slug"]
