from types import MappingProxyType
from typing import Mapping

PHB_ID = 1   # Player's Handbook, the default
EE_ID = 2    # Elemental Evil Player's Companion
SCAG_ID = 3  # Sword Coast Adventurer's Guide

SOURCES: Mapping[int, str] = MappingProxyType({
    PHB_ID: "Player's Handbook",
    EE_ID: "Elemental Evil",
    SCAG_ID: "Sword Coast Adventurer's Guide",
})

NAME_SUFFIXES = (" (EE)", " (SCAG)")

def classify_source(name: str) -> int:
    source_id = PHB_ID
    if "(EE)" in name:
        source_id = EE_ID
    # checked second, so it wins if a name somehow carries both
    if "(SCAG)" in name:
        source_id = SCAG_ID
    return source_id

def trim_source_from_name(name: str) -> str:
    for suffix in NAME_SUFFIXES:
        name = name.replace(suffix, "")
    return name
