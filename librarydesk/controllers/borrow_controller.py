from flask import Blueprint, current_app, request, jsonify

from librarydesk.schemas import BorrowCreate, ExtendReturnDate
from librarydesk.services.borrow_service import BorrowService
from librarydesk.utils.errors import ServiceError, json_error
from librarydesk.utils.validation import parse_body, parse_record_id

borrow_bp = Blueprint("borrow", __name__)


def record_json(r):
    return {
        "id": r.id,
        "stud_id": r.stud_id,
        "name": r.name,
        "age": r.age,
        "grade": r.grade,
        "section": r.section,
        "book": r.book,
        "duration": r.duration,
        "returnDate": r.return_date.isoformat(),
        "isGood": bool(r.is_good),
        "createdAt": r.created_at.isoformat() if r.created_at else None,
        "updatedAt": r.updated_at.isoformat() if r.updated_at else None,
    }


@borrow_bp.get("/list-students")
def list_students():
    records = BorrowService.list_records()
    return jsonify({"success": True, "data": [record_json(r) for r in records]})


@borrow_bp.get("/search-students")
def search_students():
    try:
        rows = BorrowService.search_by_name(request.args.get("name"))
        return jsonify({"success": True, "data": [record_json(r) for r in rows]})
    except ServiceError as e:
        return json_error(e)


@borrow_bp.get("/return-date/<duration>")
def preview_return_date(duration: str):
    try:
        due = BorrowService.return_date_for(duration)
        return jsonify({"success": True, "data": {"year": due.year, "month": due.month, "day": due.day}})
    except ServiceError as e:
        return json_error(e)


@borrow_bp.post("/add-student")
def add_student():
    try:
        payload = parse_body(
            BorrowCreate,
            request.get_json(silent=True),
            "Required student/loan fields are missing or invalid.",
        )
        record = BorrowService.create_borrow(payload)
        return jsonify({
            "success": True,
            "message": "Student borrowing record added successfully",
            "data": record_json(record),
        }), 201
    except ServiceError as e:
        if e.status_code == 400:
            current_app.logger.warning(f"[borrow] add-student rejected: {e.message}")
        return json_error(e)


@borrow_bp.delete("/return-book/<record_id>")
def return_book(record_id):
    try:
        BorrowService.return_book(parse_record_id(record_id))
        return jsonify({"success": True, "message": "Book returned and borrow record deleted successfully"})
    except ServiceError as e:
        return json_error(e)


@borrow_bp.put("/extend-return-date/<record_id>")
def extend_return_date(record_id):
    try:
        rid = parse_record_id(record_id)
        payload = parse_body(ExtendReturnDate, request.get_json(silent=True), "newReturnDate is required")
        record = BorrowService.extend_return_date(rid, payload)
        return jsonify({
            "success": True,
            "message": "Book return date extended successfully",
            "data": record_json(record),
        })
    except ServiceError as e:
        return json_error(e)


@borrow_bp.put("/update-student-status")
def update_student_status():
    summary = BorrowService.refresh_statuses()
    current_app.logger.info(f"[borrow] status refresh processed={summary['processed']} overdue={summary['overdue']}")
    return jsonify({"success": True, "message": "Student statuses updated successfully", "data": summary})
