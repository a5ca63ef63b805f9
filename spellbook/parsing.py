from typing import List, Mapping, NamedTuple, Optional

from .classes import CLASSES, lookup_class
from .errors import MalformedComponents
from .models import ClassAssociation, Components

CLASS_SEPARATOR = ", "

# Component letters are upper case and spell materials are written in lower
# case, so plain containment is enough for the compendium.
def has_verbal(raw: str) -> bool:
    return "V" in raw

def has_somatic(raw: str) -> bool:
    return "S" in raw

def has_material(raw: str) -> bool:
    return "M" in raw

def capitalize_at_index(s: str, i: int = 0) -> str:
    """Upper-case the single character at ``i``; out of range returns ``s`` unchanged."""
    if i < 0 or i >= len(s):
        return s
    up = s[i].upper()
    # e.g. "ß" -> "SS"; keep the original rather than change the length
    if len(up) != 1:
        return s
    return s[:i] + up + s[i + 1:]

def material_description(raw: str, strict: bool = False) -> Optional[str]:
    """
    Pull the text inside the parentheses of e.g. 'V, S, M (a bit of fleece)'.

    Everything between the first '(' and the last character is taken, which
    assumes the string ends with ')'. Without it the last character is lost,
    unless ``strict`` is set, in which case MalformedComponents is raised.
    Returns None when there is no '(' or nothing inside it.
    """
    i = raw.find("(")
    if i < 0:
        return None
    if strict and not raw.endswith(")"):
        raise MalformedComponents(raw)
    desc = capitalize_at_index(raw[i + 1:len(raw) - 1], 0)
    return desc or None

def parse_components(raw: str, strict: bool = False) -> Components:
    return Components(
        verbal=has_verbal(raw),
        somatic=has_somatic(raw),
        material=has_material(raw),
        material_desc=material_description(raw, strict=strict),
    )

class ClassResolution(NamedTuple):
    ok: bool
    classes: List[ClassAssociation]
    unknown: List[str]

def parse_classes(raw: str, table: Mapping[str, ClassAssociation] = CLASSES) -> ClassResolution:
    """
    Resolve 'Druid, Sorcerer, Wizard' against the class table.
    All or nothing: one unknown name and no classes are returned.
    """
    found: List[ClassAssociation] = []
    unknown: List[str] = []
    for name in raw.split(CLASS_SEPARATOR):
        c = lookup_class(name, table)
        if c is None:
            unknown.append(name)
        else:
            found.append(c)
    if unknown:
        return ClassResolution(False, [], unknown)
    return ClassResolution(True, found, [])
