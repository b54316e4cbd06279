"""Commissioner announcements stored alongside the fallback league roster."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from mffl.content.store import (
    DATA_DIR,
    JsonDocument,
    new_id,
    parse_timestamp,
    utc_now_iso,
)
from mffl.errors import ContentValidationError, NotFoundError

MAX_TITLE = 140
MAX_BODY = 5000


def default_league_document() -> Dict[str, Any]:
    return {
        "leagueName": "MFFL",
        "announcements": [
            {
                "id": "welcome",
                "title": "Welcome to MFFL!",
                "body": "Draft night complete. Waivers run Wed 3am ET.",
                "date": "2025-09-01T18:00:00-04:00",
            }
        ],
        "roster": [],
    }


class AnnouncementStore:
    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self._doc = JsonDocument(path or DATA_DIR / "mffl.json", default_league_document)

    def league_document(self) -> Dict[str, Any]:
        """The whole local document: league name, announcements, fallback roster."""
        data = self._doc.load()
        if not isinstance(data, dict):
            data = default_league_document()
        if not isinstance(data.get("announcements"), list):
            data["announcements"] = []
        if not isinstance(data.get("roster"), list):
            data["roster"] = []
        return data

    def list(self) -> List[Dict[str, Any]]:
        return self.league_document()["announcements"]

    def create(self, title: str, body: str, image: Optional[str] = None) -> Dict[str, Any]:
        """Add an announcement; the list stays sorted newest first."""
        title = (title or "").strip()
        body = (body or "").strip()
        if not title or not body:
            raise ContentValidationError("Title and body required")

        item: Dict[str, Any] = {
            "id": new_id(),
            "title": title[:MAX_TITLE],
            "body": body[:MAX_BODY],
            "date": utc_now_iso(),
        }
        if image:
            item["image"] = str(image)

        data = self.league_document()
        data["announcements"].insert(0, item)
        data["announcements"].sort(key=lambda a: parse_timestamp(a.get("date")), reverse=True)
        self._doc.save(data)
        return item

    def delete(self, announcement_id: str) -> Dict[str, Any]:
        data = self.league_document()
        announcements = data["announcements"]
        for index, item in enumerate(announcements):
            if str(item.get("id")) == str(announcement_id):
                removed = announcements.pop(index)
                self._doc.save(data)
                return removed
        raise NotFoundError(f"Announcement {announcement_id} not found")
