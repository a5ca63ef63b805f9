import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List
import pandas as pd

from .models import RawEntry

# <spell> child element -> RawEntry field
SCALAR_FIELDS = ["name", "level", "school", "ritual", "time", "range", "components", "duration", "classes"]

def _spell_from_element(el: ET.Element) -> RawEntry:
    values = {f: el.findtext(f, default="") or "" for f in SCALAR_FIELDS}
    # <text/> elements are paragraph markers, keep them as ""
    texts = [t.text or "" for t in el.findall("text")]
    return RawEntry(texts=texts, **values)

def parse_compendium(xml_text: str | bytes) -> List[RawEntry]:
    root = ET.fromstring(xml_text)
    return [_spell_from_element(el) for el in root.iter("spell")]

def read_compendium_xml(path: str | Path) -> List[RawEntry]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Compendium not found: {path}")
    root = ET.parse(path).getroot()
    return [_spell_from_element(el) for el in root.iter("spell")]

def write_parquet(df: pd.DataFrame, path: str | Path) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    df.to_parquet(path, index=False)

def write_csv(df: pd.DataFrame, path: str | Path) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
