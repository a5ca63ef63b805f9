from types import MappingProxyType
from typing import Mapping, Optional, List, Tuple
from slugify import slugify

from .models import ClassAssociation
from .sources import PHB_ID, SCAG_ID

# (id, name as written in the compendium, base class id, source id)
# Subclasses only appear here when they grant their own spell list.
_CLASS_ROWS: List[Tuple[int, str, Optional[int], int]] = [
    (1, "Barbarian", None, PHB_ID),
    (2, "Bard", None, PHB_ID),
    (3, "Cleric", None, PHB_ID),
    (4, "Druid", None, PHB_ID),
    (5, "Fighter", None, PHB_ID),
    (6, "Monk", None, PHB_ID),
    (7, "Paladin", None, PHB_ID),
    (8, "Ranger", None, PHB_ID),
    (9, "Rogue", None, PHB_ID),
    (10, "Sorcerer", None, PHB_ID),
    (11, "Warlock", None, PHB_ID),
    (12, "Wizard", None, PHB_ID),
    # Divine domains
    (13, "Cleric (Knowledge)", 3, PHB_ID),
    (14, "Cleric (Life)", 3, PHB_ID),
    (15, "Cleric (Light)", 3, PHB_ID),
    (16, "Cleric (Nature)", 3, PHB_ID),
    (17, "Cleric (Tempest)", 3, PHB_ID),
    (18, "Cleric (Trickery)", 3, PHB_ID),
    (19, "Cleric (War)", 3, PHB_ID),
    # Circle of the Land terrains
    (20, "Druid (Arctic)", 4, PHB_ID),
    (21, "Druid (Coast)", 4, PHB_ID),
    (22, "Druid (Desert)", 4, PHB_ID),
    (23, "Druid (Forest)", 4, PHB_ID),
    (24, "Druid (Grassland)", 4, PHB_ID),
    (25, "Druid (Mountain)", 4, PHB_ID),
    (26, "Druid (Swamp)", 4, PHB_ID),
    (27, "Druid (Underdark)", 4, PHB_ID),
    # Sacred oaths
    (28, "Paladin (Ancients)", 7, PHB_ID),
    (29, "Paladin (Devotion)", 7, PHB_ID),
    (30, "Paladin (Vengeance)", 7, PHB_ID),
    # Otherworldly patrons
    (31, "Warlock (Archfey)", 11, PHB_ID),
    (32, "Warlock (Fiend)", 11, PHB_ID),
    (33, "Warlock (Great Old One)", 11, PHB_ID),
    # Third casters
    (34, "Fighter (Eldritch Knight)", 5, PHB_ID),
    (35, "Rogue (Arcane Trickster)", 9, PHB_ID),
    # Sword Coast Adventurer's Guide
    (36, "Cleric (Arcana)", 3, SCAG_ID),
    (37, "Paladin (Crown)", 7, SCAG_ID),
    (38, "Warlock (Undying)", 11, SCAG_ID),
]

def _build(rows) -> Mapping[str, ClassAssociation]:
    table = {}
    for cid, name, base, source in rows:
        table[name] = ClassAssociation(
            id=cid,
            name=name,
            base_class_id=base,
            source_id=source,
            slug=slugify(name, separator="_"),
        )
    return MappingProxyType(table)

CLASSES: Mapping[str, ClassAssociation] = _build(_CLASS_ROWS)

def lookup_class(name: str, table: Mapping[str, ClassAssociation] = CLASSES) -> Optional[ClassAssociation]:
    return table.get(name)
