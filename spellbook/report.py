import pandas as pd
from typing import Dict, List, Optional

from .sources import SOURCES

def summarize(tables: Dict[str, pd.DataFrame]) -> Dict[str, pd.Series]:
    spells = tables["spells"]
    class_spells = tables["class_spells"]
    return {
        "school": spells["school"].value_counts(),
        "level": spells["level"].value_counts().sort_index(),
        "source": spells["source_id"].map(dict(SOURCES)).value_counts(),
        "class": class_spells["class_slug"].value_counts(),
    }

def print_basic_report(tables: Dict[str, pd.DataFrame], failures: Optional[List] = None) -> None:
    spells = tables["spells"]
    print("=== Spells:", len(spells))
    if spells.empty:
        return
    counts = summarize(tables)

    print("\nBy school:")
    print(counts["school"])

    print("\nBy level:")
    print(counts["level"])

    print("\nBy source:")
    print(counts["source"])

    print("\nTop classes:")
    print(counts["class"].head(15))

    print("\nConcentration:", int(spells["concentration"].sum()),
          "| Ritual:", int(spells["ritual"].sum()))

    if not tables["class_spells"].empty:
        print("\nAvg classes per spell:")
        per_spell = tables["class_spells"].groupby("row_id").size().mean()
        print(round(per_spell, 2))

    if failures:
        print(f"\nSkipped {len(failures)} entries")
