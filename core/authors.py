"""Encoding of the ``authors`` text column.

New rows store a JSON array of names. Older rows may hold a bare name or a
free-form string; those decode to a single-author list.
"""
import json
from typing import Iterable, List


def split_authors(value: str) -> List[str]:
    """Split a comma-separated form value into trimmed, non-blank names."""
    return [name.strip() for name in value.split(",") if name.strip()]


def clean_authors(names: Iterable[str]) -> List[str]:
    return [name.strip() for name in names if isinstance(name, str) and name.strip()]


def encode_authors(names: Iterable[str]) -> str:
    return json.dumps(clean_authors(names))


def decode_authors(raw: str | None) -> List[str]:
    if raw is None or not raw.strip():
        return []
    try:
        value = json.loads(raw)
    except ValueError:
        return [raw]
    if isinstance(value, list):
        return [str(name) for name in value if name is not None and str(name).strip()]
    if isinstance(value, str):
        return [value] if value.strip() else []
    # a JSON number or object is not an author list
    return [raw]
