import argparse
import sys
from pathlib import Path

from spellbook.batch import convert_all
from spellbook.config import ImportConfig, load_config
from spellbook.dataio import read_compendium_xml, write_parquet, write_csv
from spellbook.errors import EntryConversionError
from spellbook.features import to_tables
from spellbook.report import print_basic_report
from spellbook.store import write_sqlite

CONFIG_FILE = Path("spellbook.json")

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Normalize an XML spell compendium into spell/class tables")
    p.add_argument("--config", default=str(CONFIG_FILE), help="JSON config file (optional)")
    p.add_argument("--xml", help="Path to the compendium XML")
    p.add_argument("--out", help="Output directory")
    p.add_argument("--skip-bad", action="store_true", help="Skip entries that fail instead of aborting")
    p.add_argument("--strict", action="store_true", help="Reject components with unclosed parentheses")
    p.add_argument("--format", action="append", dest="formats", help="parquet, csv or sqlite (repeatable)")
    return p.parse_args(argv)

def build_config(args) -> ImportConfig:
    cfg = load_config(args.config)
    if args.xml:
        cfg.xml_path = args.xml
    if args.out:
        cfg.out_dir = args.out
    if args.skip_bad:
        cfg.on_error = "skip"
    if args.strict:
        cfg.strict_components = True
    if args.formats:
        cfg.formats = args.formats
    return cfg.validate()

def main(argv=None) -> int:
    cfg = build_config(parse_args(argv))
    entries = read_compendium_xml(cfg.xml_path)
    print(f"Read {len(entries)} spells from {cfg.xml_path}")

    try:
        result = convert_all(entries, on_error=cfg.on_error, strict_components=cfg.strict_components)
    except EntryConversionError as e:
        print(f"[ERROR] {e}")
        print("Nothing written. Re-run with --skip-bad to import the rest.")
        return 1

    for f in result.failures:
        print(f"[WARN] Skipping spell #{f.index} ({f.name}): {f.error}")

    tables = to_tables(result.converted)
    out = Path(cfg.out_dir)
    if "parquet" in cfg.formats:
        write_parquet(tables["spells"], out / "spells.parquet")
        write_parquet(tables["class_spells"], out / "class_spells.parquet")
    if "csv" in cfg.formats:
        write_csv(tables["spells"], out / "spells.csv")
        write_csv(tables["class_spells"], out / "class_spells.csv")
    if "sqlite" in cfg.formats:
        write_sqlite(result.converted, out / "spells.db")

    print(f"Saved to {out}")
    print_basic_report(tables, result.failures)
    return 0

if __name__ == "__main__":
    sys.exit(main())
