
from flask import current_app
from sqlalchemy.exc import IntegrityError

from librarydesk.models.member import Member
from librarydesk.repositories.borrow_repo import BorrowRepo
from librarydesk.repositories.member_repo import MemberRepo
from librarydesk.schemas import MemberCreate, MemberUpdate
from librarydesk.utils.errors import Conflict, NotFound, RevokeBlocked, ValidationFailed
from librarydesk.utils.validation import check_stud_id

INITIAL_SCORE = 10


def level_for_grade(grade) -> str:
    try:
        g = int(grade)
    except (TypeError, ValueError):
        return "Undefined"

    if 1 <= g <= 5:
        return "Primary"
    if 6 <= g <= 8:
        return "Secondary"
    if 9 <= g <= 12:
        return "High School"
    return "Undefined"


class MemberService:
    @staticmethod
    def list_members():
        return MemberRepo.list_all()

    @staticmethod
    def create_member(payload: MemberCreate) -> Member:
        if MemberRepo.find_clone(payload.name, payload.age, payload.parent_phone):
            raise Conflict("A member with similar details (name, age, and parent phone) already exists.")

        if MemberRepo.get_by_stud_id(payload.stud_id):
            raise Conflict("A member with this Student ID (stud_id) already exists.")

        member = Member(
            stud_id=payload.stud_id,
            name=payload.name,
            parent_phone=payload.parent_phone,
            age=payload.age,
            grade=payload.grade,
            section=payload.section,
            level=level_for_grade(payload.grade),
            score=INITIAL_SCORE,
        )
        try:
            MemberRepo.create(member)
        except IntegrityError:
            MemberRepo.rollback()
            raise Conflict("A member with this Student ID (stud_id) already exists.") from None

        current_app.logger.info(f"[members] added stud_id={member.stud_id} level={member.level}")
        return member

    @staticmethod
    def edit_member(stud_id: str, payload: MemberUpdate) -> Member:
        check_stud_id(stud_id)
        changes = payload.changes()
        if not changes:
            raise ValidationFailed("No valid fields provided for update.")

        member = MemberRepo.get_by_stud_id(stud_id)
        if not member:
            raise NotFound("Member not found.")

        for field, value in changes.items():
            setattr(member, field, value)
        if "grade" in changes:
            member.level = level_for_grade(changes["grade"])

        MemberRepo.update()
        current_app.logger.info(f"[members] updated stud_id={stud_id} fields={sorted(changes)}")
        return member

    @staticmethod
    def revoke(stud_id: str):
        """
        Üyeliği siler. Üyenin herhangi bir BorrowRecord'u varsa aktif ödünç sayılır
        ve silme engellenir (RevokeBlocked, 200 + err).
        """
        check_stud_id(stud_id)

        loan = BorrowRepo.get_by_member(stud_id)
        if loan:
            current_app.logger.info(f"[members] revoke blocked stud_id={stud_id} record id={loan.id}")
            raise RevokeBlocked("Student has an active book borrow and cannot be revoked.")

        member = MemberRepo.get_by_stud_id(stud_id)
        if not member:
            raise NotFound("Member not found in Members collection.")

        MemberRepo.delete(member)
        current_app.logger.info(f"[members] revoked stud_id={stud_id}")
