from flask import Blueprint, request, jsonify

from librarydesk.schemas import ManualShelfAdd, ShelfAdd
from librarydesk.services.shelf_service import ShelfService
from librarydesk.utils.errors import ServiceError, json_error
from librarydesk.utils.validation import parse_body, parse_record_id

shelf_bp = Blueprint("shelf", __name__)


def shelf_json(item):
    return {
        "id": item.id,
        "identifierKey": item.identifier_key,
        "bookData": item.book_data,
        "dateAdded": item.date_added.isoformat() if item.date_added else None,
    }


@shelf_bp.put("/add-shelf")
def add_shelf():
    try:
        payload = parse_body(
            ShelfAdd,
            request.get_json(silent=True),
            "A bookDets object with a unique key and a title is required.",
        )
        item = ShelfService.add_book(payload)
        return jsonify({"success": True, "message": "Book added to shelf successfully", "data": shelf_json(item)}), 201
    except ServiceError as e:
        return json_error(e)


@shelf_bp.put("/shelf-manual")
def add_shelf_manual():
    try:
        payload = parse_body(ManualShelfAdd, request.get_json(silent=True), "bookName and bookAuthor are required.")
        item = ShelfService.add_manual(payload)
        return jsonify({"success": True, "message": "Book added to shelf", "data": shelf_json(item)}), 201
    except ServiceError as e:
        return json_error(e)


@shelf_bp.get("/shelf-item")
def list_shelf():
    return jsonify({"success": True, "data": [shelf_json(i) for i in ShelfService.list_items()]})


@shelf_bp.delete("/shelf-item/<item_id>")
def delete_shelf_item(item_id):
    try:
        ShelfService.delete_item(parse_record_id(item_id))
        return jsonify({"success": True, "message": "Book deleted successfully"})
    except ServiceError as e:
        return json_error(e)
