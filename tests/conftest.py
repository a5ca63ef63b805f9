import pytest

from spellbook.models import RawEntry

COMPENDIUM_XML = """<?xml version="1.0" encoding="UTF-8"?>
<compendium version="5">
  <spell>
    <name>Produce Flame (SCAG)</name>
    <level>0</level>
    <school>EV</school>
    <ritual></ritual>
    <time>1 action</time>
    <range>Self</range>
    <components>V, S</components>
    <duration>10 minutes</duration>
    <classes>Druid, Warlock</classes>
    <text>A small flame...</text>
  </spell>
  <spell>
    <name>Detect Magic</name>
    <level>1</level>
    <school>D</school>
    <ritual>YES</ritual>
    <time>1 action</time>
    <range>Self</range>
    <components>V, S</components>
    <duration>Concentration, up to 10 minutes</duration>
    <classes>Bard, Cleric, Druid, Paladin, Ranger, Sorcerer, Wizard</classes>
    <text>For the duration, you sense magic.</text>
    <text />
    <text>You can use your action to see a faint aura; this requires concentration.</text>
  </spell>
  <spell>
    <name>Bad School</name>
    <level>1</level>
    <school>XX</school>
    <components>V</components>
    <classes>Wizard</classes>
  </spell>
  <spell>
    <name>Ice Knife (EE)</name>
    <level>1</level>
    <school>C</school>
    <time>1 action</time>
    <range>60 feet</range>
    <components>S, M (a drop of water or piece of ice)</components>
    <duration>Instantaneous</duration>
    <classes>Druid, Sorcerer, Wizard</classes>
    <text>You create a shard of ice &amp; fling it.</text>
  </spell>
</compendium>
"""

@pytest.fixture
def compendium_xml():
    return COMPENDIUM_XML

@pytest.fixture
def produce_flame():
    return RawEntry(
        name="Produce Flame (SCAG)",
        level="0",
        school="EV",
        ritual="",
        time="1 action",
        range="Self",
        components="V, S",
        duration="10 minutes",
        classes="Druid, Warlock",
        texts=["A small flame..."],
    )
