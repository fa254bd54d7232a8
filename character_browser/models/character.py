"""Domain model for a Character record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from character_browser.errors import DecodeError


def _nested_name(record: Dict[str, Any], field: str) -> str:
    """`record[field]["name"]`, or "" when the field is absent."""
    value = record.get(field)
    if value is None:
        return ""
    if not isinstance(value, dict):
        raise DecodeError(f"character field '{field}' is not an object")
    return str(value.get("name") or "")


@dataclass(frozen=True, slots=True)
class Character:
    id: int
    name: str
    status: str = ""
    species: str = ""
    type: str = ""
    gender: str = ""
    origin_name: str = ""
    location_name: str = ""
    image: str = ""
    url: str = ""
    created: str = ""
    episodes: Tuple[str, ...] = ()

    # ---------- mappings ----------
    @classmethod
    def from_api(cls, record: Any) -> "Character":
        """Build a `Character` from one entry of the `results` array."""
        if not isinstance(record, dict):
            raise DecodeError("character record is not an object")

        raw_id = record.get("id")
        # bool is an int subclass; a true/false id is still malformed
        if not isinstance(raw_id, int) or isinstance(raw_id, bool):
            raise DecodeError(f"character record has no integer id: {raw_id!r}")

        episodes = record.get("episode") or ()
        if not isinstance(episodes, (list, tuple)):
            raise DecodeError(f"character {raw_id} has a malformed episode list")

        return cls(
            id=raw_id,
            name=str(record.get("name") or ""),
            status=str(record.get("status") or ""),
            species=str(record.get("species") or ""),
            type=str(record.get("type") or ""),
            gender=str(record.get("gender") or ""),
            origin_name=_nested_name(record, "origin"),
            location_name=_nested_name(record, "location"),
            image=str(record.get("image") or ""),
            url=str(record.get("url") or ""),
            created=str(record.get("created") or ""),
            episodes=tuple(str(e) for e in episodes),
        )

    @property
    def key(self) -> str:
        """List key used by the presentation layer."""
        return str(self.id)
