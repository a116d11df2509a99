from flask import Blueprint, request, jsonify

from librarydesk.schemas import MemberCreate, MemberUpdate
from librarydesk.services.member_service import MemberService
from librarydesk.utils.errors import ServiceError, json_error
from librarydesk.utils.validation import parse_body

member_bp = Blueprint("members", __name__)


def member_json(m):
    return {
        "id": m.id,
        "stud_id": m.stud_id,
        "name": m.name,
        "parentPhone": m.parent_phone,
        "age": m.age,
        "grade": m.grade,
        "section": m.section,
        "level": m.level,
        "score": m.score,
        "createdAt": m.created_at.isoformat() if m.created_at else None,
        "updatedAt": m.updated_at.isoformat() if m.updated_at else None,
    }


@member_bp.put("/add/member")
def add_member():
    try:
        payload = parse_body(MemberCreate, request.get_json(silent=True), "All fields are required, including stud_id.")
        member = MemberService.create_member(payload)
        return jsonify({"success": True, "message": "Member added successfully", "data": member_json(member)}), 201
    except ServiceError as e:
        return json_error(e)


@member_bp.get("/get-members")
def get_members():
    return jsonify({"success": True, "data": [member_json(m) for m in MemberService.list_members()]})


@member_bp.put("/edit-member/<stud_id>")
def edit_member(stud_id: str):
    try:
        payload = parse_body(MemberUpdate, request.get_json(silent=True), "Invalid member update.")
        member = MemberService.edit_member(stud_id, payload)
        return jsonify({"success": True, "message": "Member updated successfully", "data": member_json(member)})
    except ServiceError as e:
        return json_error(e)


@member_bp.delete("/revoke-member/<stud_id>")
def revoke_member(stud_id: str):
    try:
        MemberService.revoke(stud_id)
        return jsonify({"success": True, "message": "Member revoked successfully."})
    except ServiceError as e:
        return json_error(e)
