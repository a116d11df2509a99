# librarydesk/services/book_lookup_service.py
from __future__ import annotations

import re

import requests
from flask import current_app

from librarydesk.utils.errors import NotFound, UpstreamError, ValidationFailed

ISBN_RE = re.compile(r"^(?:\d{9}[\dX]|\d{13})$")


class BookLookupService:
    """Open Library üzerinden ISBN -> başlık + kapak proxy'si."""

    @staticmethod
    def normalize_isbn(raw: str) -> str:
        isbn = (raw or "").replace("-", "").replace(" ", "").upper()
        if not ISBN_RE.match(isbn):
            raise ValidationFailed(f"Invalid ISBN: {raw}")
        return isbn

    @staticmethod
    def lookup(raw_isbn: str) -> dict:
        isbn = BookLookupService.normalize_isbn(raw_isbn)
        cfg = current_app.config
        bibkey = f"ISBN:{isbn}"

        try:
            response = requests.get(
                f"{cfg['OPENLIBRARY_BASE_URL']}/api/books",
                params={"bibkeys": bibkey, "format": "json", "jscmd": "details"},
                timeout=cfg["BOOK_LOOKUP_TIMEOUT"],
            )
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.Timeout:
            current_app.logger.warning(f"[lookup] timeout isbn={isbn}")
            raise UpstreamError("Book lookup timed out") from None
        except requests.exceptions.RequestException as e:
            current_app.logger.warning(f"[lookup] request failed isbn={isbn}: {e}")
            raise UpstreamError("Book lookup failed") from None

        entry = payload.get(bibkey) if isinstance(payload, dict) else None
        details = entry.get("details") if isinstance(entry, dict) else None
        if not details:
            raise NotFound("Book details not found")

        return {
            "title": details.get("title"),
            "coverImageUrl": f"{cfg['OPENLIBRARY_COVERS_URL']}/b/isbn/{isbn}-L.jpg",
        }
