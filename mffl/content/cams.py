"""Cam's Corner: an ordered bulletin board of text posts and image cards."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from mffl.content.store import DATA_DIR, JsonDocument, new_id, utc_now_iso
from mffl.errors import ContentValidationError, NotFoundError

MAX_CAPTION = 200
SPANS = (6, 12)


def _span(value: Any) -> int:
    try:
        return 12 if int(value) == 12 else 6
    except (TypeError, ValueError):
        return 6


def _empty_board() -> Dict[str, Any]:
    return {"blocks": [], "order": []}


class CamsBoard:
    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self._doc = JsonDocument(path or DATA_DIR / "cams.json", _empty_board)

    def _load(self) -> Dict[str, Any]:
        data = self._doc.load()
        if not isinstance(data, dict):
            data = _empty_board()
        blocks = data.get("blocks") if isinstance(data.get("blocks"), list) else []
        order = data.get("order")
        if not isinstance(order, list):
            order = [b.get("id") for b in blocks]
        return {"blocks": blocks, "order": order}

    def items(self) -> List[Dict[str, Any]]:
        """Blocks in display order; order entries without a block are skipped."""
        data = self._load()
        by_id = {b.get("id"): b for b in data["blocks"]}
        return [by_id[block_id] for block_id in data["order"] if block_id in by_id]

    def add_post(self, body: str, title: str = "", span: Any = 6) -> Dict[str, Any]:
        body = (body or "").strip()
        if not body:
            raise ContentValidationError("Body required")
        return self._add(
            {
                "id": new_id(),
                "type": "post",
                "title": (title or "").strip() or "Untitled",
                "body": body,
                "when": utc_now_iso(),
                "span": _span(span),
            }
        )

    def add_image(self, url: str, caption: str = "", span: Any = 6) -> Dict[str, Any]:
        """Image cards reference an already-hosted URL; uploads are handled elsewhere."""
        url = (url or "").strip()
        if not url:
            raise ContentValidationError("Image url required")
        return self._add(
            {
                "id": new_id(),
                "type": "image",
                "url": url,
                "caption": (caption or "")[:MAX_CAPTION],
                "span": _span(span),
            }
        )

    def _add(self, block: Dict[str, Any]) -> Dict[str, Any]:
        data = self._load()
        data["blocks"].append(block)
        data["order"] = [block["id"]] + [i for i in data["order"] if i != block["id"]]
        self._doc.save(data)
        return block

    def delete(self, block_id: str) -> Dict[str, Any]:
        data = self._load()
        for index, block in enumerate(data["blocks"]):
            if block.get("id") == block_id:
                removed = data["blocks"].pop(index)
                data["order"] = [i for i in data["order"] if i != block_id]
                self._doc.save(data)
                return removed
        raise NotFoundError(f"Block {block_id} not found")

    def save_layout(
        self, order: Sequence[str], sizes: Optional[Mapping[str, Any]] = None
    ) -> None:
        """Reorder blocks (unknown IDs dropped) and optionally resize them."""
        data = self._load()
        valid = {b.get("id") for b in data["blocks"]}
        filtered = [str(i) for i in order if str(i) in valid]
        if not filtered:
            raise ContentValidationError("invalid order")

        data["order"] = filtered
        for block in data["blocks"]:
            if sizes and block.get("id") in sizes:
                try:
                    size = int(sizes[block["id"]])
                except (TypeError, ValueError):
                    continue
                if size in SPANS:
                    block["span"] = size
        self._doc.save(data)
