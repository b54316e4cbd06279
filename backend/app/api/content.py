"""Commissioner content: announcements, suggestions, Cam's Corner and spiffs."""

import logging
from typing import Any, Dict, List, Optional

from app.dependencies import (
    get_announcements,
    get_cams,
    get_spiffs,
    get_suggestions,
)
from app.models import AnnouncementItem
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from mffl.content.announcements import AnnouncementStore
from mffl.content.cams import CamsBoard
from mffl.content.spiffs import SpiffLedger
from mffl.content.suggestions import SuggestionStore
from mffl.errors import ContentValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


class AnnouncementRequest(BaseModel):
    """Request body for posting an announcement."""

    title: str = ""
    body: str = ""
    image: Optional[str] = None


class SuggestionRequest(BaseModel):
    """Request body for the suggestion box."""

    text: str = ""
    name: str = ""


class CamsBlockRequest(BaseModel):
    """Request body for a new Cam's Corner block.

    ``type`` is ``post`` (title/body) or ``image`` (url/caption).
    """

    type: str = "post"
    title: str = ""
    body: str = ""
    url: str = ""
    caption: str = ""
    span: int = 6


class CamsLayoutRequest(BaseModel):
    """Request body for reordering and resizing blocks."""

    order: List[str]
    sizes: Optional[Dict[str, int]] = None


class SpiffsRequest(BaseModel):
    """Request body replacing every balance."""

    banks: Dict[str, Any]


# Announcements


@router.get("/announcements", response_model=List[AnnouncementItem])
def list_announcements(store: AnnouncementStore = Depends(get_announcements)):
    return store.list()


@router.post("/announcements", response_model=AnnouncementItem)
def create_announcement(
    request: AnnouncementRequest,
    store: AnnouncementStore = Depends(get_announcements),
):
    """Post an announcement; the list stays newest first."""
    item = store.create(request.title, request.body, request.image)
    logger.info("Created announcement %s", item["id"])
    return item


@router.delete("/announcements/{announcement_id}")
def delete_announcement(
    announcement_id: str, store: AnnouncementStore = Depends(get_announcements)
):
    store.delete(announcement_id)
    logger.info("Deleted announcement %s", announcement_id)
    return {"ok": True}


# Suggestions


@router.get("/suggestions")
def list_suggestions(store: SuggestionStore = Depends(get_suggestions)):
    return store.list()


@router.post("/suggestions")
def submit_suggestion(
    request: SuggestionRequest, store: SuggestionStore = Depends(get_suggestions)
):
    return store.submit(request.text, request.name)


# Cam's Corner


@router.get("/cams")
def list_cams(board: CamsBoard = Depends(get_cams)):
    """Blocks in display order."""
    return {"items": board.items()}


@router.post("/cams/blocks")
def add_cams_block(request: CamsBlockRequest, board: CamsBoard = Depends(get_cams)):
    if request.type == "image":
        return board.add_image(request.url, request.caption, request.span)
    if request.type == "post":
        return board.add_post(request.body, request.title, request.span)
    raise ContentValidationError(f"Unknown block type: {request.type}")


@router.delete("/cams/blocks/{block_id}")
def delete_cams_block(block_id: str, board: CamsBoard = Depends(get_cams)):
    board.delete(block_id)
    return {"ok": True}


@router.put("/cams/layout")
def save_cams_layout(request: CamsLayoutRequest, board: CamsBoard = Depends(get_cams)):
    board.save_layout(request.order, request.sizes)
    return {"ok": True}


# Spiff Bank


@router.get("/spiffs")
def get_spiffs_ledger(ledger: SpiffLedger = Depends(get_spiffs)):
    return {"banks": ledger.banks()}


@router.put("/spiffs")
def replace_spiffs(request: SpiffsRequest, ledger: SpiffLedger = Depends(get_spiffs)):
    """Overwrite every balance; values are clamped to non-negative cents."""
    return {"ok": True, "banks": ledger.replace(request.banks)}
