#!/usr/bin/env python3
"""
generate_list.py
----------------

Merge all per-category JSON list files into a single list.json.

Each file in the lists directory must contain a JSON list of channel records.
Before anything is written, the merged list is checked:
  • every record has its required string fields
      video: number, name, code, type, category, playlist
      audio: number, name, code, type, audio   (type == "audio")
  • every `number` is unique

If either check fails, the offending records are printed and list.json is left
untouched. Files that fail to parse are reported and skipped.

Usage:
    python generate_list.py
    python generate_list.py --lists-dir lists --output list.json
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List

import pandas as pd

from channel_list import (
    ListsDirectoryError,
    check_for_duplicate_number,
    load_lists,
    validate_item_format,
    write_list,
)

# -------- configuration --------
LISTS_DIR = Path(__file__).resolve().parent / "lists"
SAVE_PATH = Path(__file__).resolve().parent / "list.json"
# --------------------------------


def print_table(rows: List[object], columns: List[str]) -> None:
    df = pd.DataFrame([asdict(r) for r in rows], columns=columns)
    print(df.to_string())


def generate(lists_dir: Path, save_path: Path) -> int:
    try:
        merged = load_lists(lists_dir)
    except ListsDirectoryError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    validation = validate_item_format(merged)
    if not validation.is_valid:
        print("ERROR: Invalid items found:", file=sys.stderr)
        print_table(validation.invalid_items, ["channel", "missing"])
        return 1

    check = check_for_duplicate_number(merged)
    if check.has_duplicate:
        print("ERROR: Duplicates found:", file=sys.stderr)
        print_table(check.duplicates, ["channel", "count"])
        return 1

    try:
        total = write_list(merged, save_path)
    except OSError as e:
        print(f"ERROR: Could not write {save_path}: {e}", file=sys.stderr)
        return 1

    print(f"Success: Total of {total} entries written to {save_path.name}")
    return 0


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Merge per-category JSON channel lists into one validated list.json."
    )
    p.add_argument("--lists-dir", type=Path, default=LISTS_DIR, help=f"Input directory (default: {LISTS_DIR})")
    p.add_argument("--output", type=Path, default=SAVE_PATH, help=f"Output file (default: {SAVE_PATH})")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    lists_dir = args.lists_dir.expanduser().resolve()
    save_path = args.output.expanduser().resolve()
    return generate(lists_dir, save_path)


if __name__ == "__main__":
    raise SystemExit(main())
