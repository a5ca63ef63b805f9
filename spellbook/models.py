from dataclasses import dataclass, field, asdict
from typing import List, Optional, Dict

@dataclass
class RawEntry:
    """One <spell> element from the compendium, text as-is."""
    name: str = ""
    level: str = ""
    school: str = ""
    ritual: str = ""
    time: str = ""
    range: str = ""
    components: str = ""
    duration: str = ""
    classes: str = ""
    texts: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class Components:
    verbal: bool
    somatic: bool
    material: bool
    material_desc: Optional[str] = None

@dataclass(frozen=True)
class NormalizedSpell:
    # column names match the spell table
    name: str
    level: str
    school: str
    cast_time: str
    duration: str
    range: str
    comp_verbal: bool
    comp_somatic: bool
    comp_material: bool
    material_desc: Optional[str]
    concentration: bool
    ritual: bool
    description: str
    source_id: int

    def to_row(self) -> Dict:
        return asdict(self)

@dataclass(frozen=True)
class ClassAssociation:
    id: int
    name: str
    base_class_id: Optional[int]
    source_id: int
    slug: str = ""
