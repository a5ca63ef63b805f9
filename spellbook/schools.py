from types import MappingProxyType
from typing import Mapping

from .errors import UnknownSchool

# Compendium abbreviations -> full school name
SCHOOLS: Mapping[str, str] = MappingProxyType({
    "A": "Abjuration",
    "C": "Conjuration",
    "D": "Divination",
    "EN": "Enchantment",
    "EV": "Evocation",
    "I": "Illusion",
    "N": "Necromancy",
    "T": "Transmutation",
})

def resolve_school(code: str, table: Mapping[str, str] = SCHOOLS) -> str:
    try:
        return table[code]
    except KeyError:
        raise UnknownSchool(code) from None
