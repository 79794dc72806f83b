"""
channel_list.py
---------------

Helpers for building the merged channel list from per-category JSON files:

- load_lists(lists_dir)               # skips files that fail to parse
- parse_record(raw)                   # VideoChannel | AudioChannel | InvalidItem
- validate_item_format(data)
- check_for_duplicate_number(data)
- write_list(data, save_path)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union


VIDEO_REQUIRED_KEYS = ("number", "name", "code", "type", "category", "playlist")
AUDIO_REQUIRED_KEYS = ("number", "name", "code", "type", "audio")


class ListsDirectoryError(OSError):
    """The lists directory could not be read."""


# ----------------------------------------------------------------------
# Record types
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class VideoChannel:
    number: str
    name: str
    code: str
    type: str
    category: str
    playlist: str


@dataclass(frozen=True)
class AudioChannel:
    number: str
    name: str
    code: str
    type: str
    audio: str


@dataclass
class InvalidItem:
    channel: Any
    missing: List[str] = field(default_factory=list)


@dataclass
class Duplicate:
    channel: Any
    count: int = 2


@dataclass
class FormatReport:
    is_valid: bool
    invalid_items: List[InvalidItem]


@dataclass
class DuplicateReport:
    has_duplicate: bool
    duplicates: List[Duplicate]


Channel = Union[VideoChannel, AudioChannel]


# ----------------------------------------------------------------------
# Loading
# ----------------------------------------------------------------------

def load_json_list(path: Path) -> list:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path.name} does not contain a JSON list")
    return data


def load_lists(lists_dir: Path) -> list:
    """
    Read every file in lists_dir (sorted by name) and concatenate their arrays.

    A missing or unreadable directory raises ListsDirectoryError. A file that
    cannot be read or parsed is reported and skipped; the remaining files are
    still merged.
    """
    try:
        entries = sorted(lists_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ListsDirectoryError(f"Error reading directory {lists_dir}: {e}") from e

    merged: list = []
    for p in entries:
        try:
            merged.extend(load_json_list(p))
        except (OSError, UnicodeDecodeError, ValueError) as e:
            print(f"WARNING: Error parsing file {p.name}: {e}")
    return merged


# ----------------------------------------------------------------------
# Validation
# ----------------------------------------------------------------------

def required_keys_for(raw: Any) -> tuple:
    if isinstance(raw, dict) and raw.get("type") == "audio":
        return AUDIO_REQUIRED_KEYS
    return VIDEO_REQUIRED_KEYS


def parse_record(raw: Any) -> Union[Channel, InvalidItem]:
    """
    Parse one raw record into its typed variant.

    Records with type "audio" are checked against the audio fields, all
    others (missing type included) against the video fields. A field only
    counts when its value is a string.
    """
    keys = required_keys_for(raw)
    fields: Dict[str, Any] = raw if isinstance(raw, dict) else {}

    missing = [k for k in keys if not isinstance(fields.get(k), str)]
    if missing:
        return InvalidItem(channel=fields.get("number"), missing=missing)

    values = {k: fields[k] for k in keys}
    if keys is AUDIO_REQUIRED_KEYS:
        return AudioChannel(**values)
    return VideoChannel(**values)


def validate_item_format(data: List[Any]) -> FormatReport:
    invalid_items = [r for r in map(parse_record, data) if isinstance(r, InvalidItem)]
    return FormatReport(is_valid=not invalid_items, invalid_items=invalid_items)


def check_for_duplicate_number(data: List[Any]) -> DuplicateReport:
    """
    Report every `number` seen more than once with its total count.

    Entries are ordered by where the second occurrence was found.
    """
    existing = set()
    duplicates: Dict[Any, Duplicate] = {}

    for item in data:
        number = item.get("number") if isinstance(item, dict) else None
        if number not in existing:
            existing.add(number)
        elif number in duplicates:
            duplicates[number].count += 1
        else:
            duplicates[number] = Duplicate(channel=number, count=2)

    found = list(duplicates.values())
    return DuplicateReport(has_duplicate=bool(found), duplicates=found)


# ----------------------------------------------------------------------
# Output
# ----------------------------------------------------------------------

def dump_list(data: List[Any]) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def write_list(data: List[Any], save_path: Path) -> int:
    save_path.write_text(dump_list(data), encoding="utf-8")
    return len(data)
