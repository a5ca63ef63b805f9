import sqlite3
from pathlib import Path
from typing import List, Mapping

from .classes import CLASSES
from .features import Converted
from .models import NormalizedSpell, ClassAssociation
from .sources import SOURCES

SCHEMA = """
DROP TABLE IF EXISTS class_spells;
DROP TABLE IF EXISTS spell;
DROP TABLE IF EXISTS class;
DROP TABLE IF EXISTS source;

CREATE TABLE source (
    id INTEGER PRIMARY KEY,
    title TEXT NOT NULL
);
CREATE TABLE class (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL UNIQUE,
    base_class_id INTEGER REFERENCES class(id),
    source_id INTEGER NOT NULL REFERENCES source(id)
);
CREATE TABLE spell (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    level TEXT NOT NULL,
    school TEXT NOT NULL,
    cast_time TEXT,
    duration TEXT,
    "range" TEXT,
    comp_verbal INTEGER NOT NULL,
    comp_somatic INTEGER NOT NULL,
    comp_material INTEGER NOT NULL,
    material_desc TEXT,
    concentration INTEGER NOT NULL,
    ritual INTEGER NOT NULL,
    description TEXT,
    source_id INTEGER NOT NULL REFERENCES source(id)
);
CREATE TABLE class_spells (
    spell_id INTEGER NOT NULL REFERENCES spell(id),
    class_id INTEGER NOT NULL REFERENCES class(id),
    PRIMARY KEY (spell_id, class_id)
);
"""

INSERT_SPELL = """
INSERT INTO spell (name, level, school, cast_time, duration, "range",
    comp_verbal, comp_somatic, comp_material, material_desc,
    concentration, ritual, description, source_id)
VALUES (:name, :level, :school, :cast_time, :duration, :range,
    :comp_verbal, :comp_somatic, :comp_material, :material_desc,
    :concentration, :ritual, :description, :source_id)
"""

def create_schema(conn: sqlite3.Connection, classes: Mapping[str, ClassAssociation] = CLASSES) -> None:
    """Wipe and recreate all tables, then seed the source and class lookups."""
    conn.executescript(SCHEMA)
    conn.executemany("INSERT INTO source (id, title) VALUES (?, ?)", SOURCES.items())
    # base classes sort before their subclasses by id
    conn.executemany(
        "INSERT INTO class (id, name, base_class_id, source_id) VALUES (?, ?, ?, ?)",
        [(c.id, c.name, c.base_class_id, c.source_id) for c in sorted(classes.values(), key=lambda c: c.id)],
    )

def insert_spell(conn: sqlite3.Connection, spell: NormalizedSpell) -> int:
    cur = conn.execute(INSERT_SPELL, spell.to_row())
    return cur.lastrowid

def insert_class_spells(conn: sqlite3.Connection, spell_id: int, classes: List[ClassAssociation]) -> None:
    conn.executemany(
        "INSERT OR IGNORE INTO class_spells (spell_id, class_id) VALUES (?, ?)",
        [(spell_id, c.id) for c in classes],
    )

def write_sqlite(
    converted: List[Converted],
    path: str | Path,
    classes: Mapping[str, ClassAssociation] = CLASSES,
) -> int:
    """
    Wipe ``path`` and write every converted spell in one transaction.
    ``classes`` must be the table the spells were normalized against; a
    class_spells row pointing at an unseeded class raises IntegrityError.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(path)
    try:
        conn.execute("PRAGMA foreign_keys = ON")
        with conn:
            create_schema(conn, classes)
            for spell, classes in converted:
                spell_id = insert_spell(conn, spell)
                insert_class_spells(conn, spell_id, classes)
    finally:
        conn.close()
    return len(converted)
