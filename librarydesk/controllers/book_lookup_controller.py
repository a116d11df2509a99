from flask import Blueprint, jsonify

from librarydesk.services.book_lookup_service import BookLookupService
from librarydesk.utils.errors import ServiceError, json_error

lookup_bp = Blueprint("lookup", __name__)


@lookup_bp.get("/book/<isbn>")
def book_by_isbn(isbn: str):
    try:
        return jsonify({"success": True, "data": BookLookupService.lookup(isbn)})
    except ServiceError as e:
        return json_error(e)
