import pandas as pd
from dataclasses import fields
from typing import Dict, List, Mapping, Tuple

from .classes import CLASSES
from .errors import UnknownClass
from .models import RawEntry, NormalizedSpell, ClassAssociation
from .parsing import parse_components, parse_classes
from .schools import SCHOOLS, resolve_school
from .sources import classify_source, trim_source_from_name
from .text import assemble_description

RITUAL_YES = "YES"

SPELL_COLUMNS = [f.name for f in fields(NormalizedSpell)]
CLASS_SPELL_COLUMNS = ["row_id", "class_id", "class_slug"]

Converted = Tuple[NormalizedSpell, List[ClassAssociation]]

def normalize(
    entry: RawEntry,
    strict_components: bool = False,
    schools: Mapping[str, str] = SCHOOLS,
    classes: Mapping[str, ClassAssociation] = CLASSES,
) -> Converted:
    """
    Turn one raw compendium entry into a spell row plus its class links.
    Raises UnknownSchool / UnknownClass (and MalformedComponents when
    ``strict_components`` is on); never returns a partial class list.
    """
    # fail fast; a spell without a school can't be stored
    school = resolve_school(entry.school, schools)

    comps = parse_components(entry.components, strict=strict_components)
    description, concentration = assemble_description(entry.texts)

    resolution = parse_classes(entry.classes, classes)
    if not resolution.ok:
        raise UnknownClass(resolution.unknown, entry.classes)

    spell = NormalizedSpell(
        name=trim_source_from_name(entry.name),
        level=entry.level,
        school=school,
        cast_time=entry.time,
        duration=entry.duration,
        range=entry.range,
        comp_verbal=comps.verbal,
        comp_somatic=comps.somatic,
        comp_material=comps.material,
        material_desc=comps.material_desc,
        concentration=concentration,
        ritual=entry.ritual == RITUAL_YES,
        description=description,
        source_id=classify_source(entry.name),
    )
    return spell, resolution.classes

def to_tables(converted: List[Converted]) -> Dict[str, pd.DataFrame]:
    spell_rows: List[Dict] = []
    class_rows: List[Dict] = []
    for row_id, (spell, classes) in enumerate(converted):
        spell_rows.append({"row_id": row_id, **spell.to_row()})
        for c in classes:
            class_rows.append({
                "row_id": row_id,
                "class_id": c.id,
                "class_slug": c.slug,
            })

    spells = pd.DataFrame(spell_rows, columns=["row_id"] + SPELL_COLUMNS)
    class_spells = pd.DataFrame(class_rows, columns=CLASS_SPELL_COLUMNS)

    return {
        "spells": spells,              # (row_id, name, level, school, ...)
        "class_spells": class_spells,  # (row_id, class_id, class_slug)
    }
