import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional

from .batch import POLICIES

FORMATS = ("parquet", "csv", "sqlite")

@dataclass
class ImportConfig:
    xml_path: str = "data/Spells Compendium 1.2.1.xml"
    out_dir: str = "processed"
    on_error: str = "abort"
    strict_components: bool = False
    formats: List[str] = field(default_factory=lambda: ["parquet"])

    def validate(self) -> "ImportConfig":
        # JSON "false" is a non-empty string, so don't let it through as truthy
        if not isinstance(self.strict_components, bool):
            raise ValueError(f"strict_components must be true or false, got {self.strict_components!r}")
        for name in ("xml_path", "out_dir"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string, got {getattr(self, name)!r}")
        if not isinstance(self.formats, list) or not all(isinstance(f, str) for f in self.formats):
            raise ValueError(f"formats must be a list of strings, got {self.formats!r}")
        if self.on_error not in POLICIES:
            raise ValueError(f"on_error must be one of {POLICIES}, got {self.on_error!r}")
        bad = [f for f in self.formats if f not in FORMATS]
        if bad:
            raise ValueError(f"Unknown output format(s) {bad}; expected any of {FORMATS}")
        return self

def load_config(path: str | Path, fallback: Optional[ImportConfig] = None) -> ImportConfig:
    """Read a JSON config; a missing or unreadable file gives ``fallback`` (or defaults)."""
    fallback = fallback if fallback is not None else ImportConfig()
    path = Path(path)
    if not path.exists():
        return fallback
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return fallback
    if not isinstance(data, dict):
        return fallback
    known = {f.name for f in fields(ImportConfig)}
    return ImportConfig(**{k: v for k, v in data.items() if k in known}).validate()
