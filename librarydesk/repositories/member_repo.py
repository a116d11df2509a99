from sqlalchemy import func
from librarydesk.models.member import Member
from librarydesk.extensions import db


class MemberRepo:
    @staticmethod
    def list_all():
        return Member.query.order_by(Member.id.desc()).all()

    @staticmethod
    def get_by_stud_id(stud_id: str):
        return Member.query.filter_by(stud_id=stud_id).first()

    @staticmethod
    def find_clone(name: str, age: int, parent_phone: str):
        return Member.query.filter(
            func.lower(Member.name) == name.lower(),
            Member.age == age,
            Member.parent_phone == parent_phone,
        ).first()

    @staticmethod
    def create(member: Member):
        db.session.add(member)
        db.session.commit()
        return member

    @staticmethod
    def update():
        db.session.commit()

    @staticmethod
    def delete(member: Member):
        db.session.delete(member)
        db.session.commit()

    @staticmethod
    def rollback():
        db.session.rollback()

    @staticmethod
    def count_all() -> int:
        return Member.query.count()

    @staticmethod
    def count_by_age():
        return (
            db.session.query(Member.age, func.count(Member.id))
            .filter(Member.age > 0)
            .group_by(Member.age)
            .order_by(Member.age.asc())
            .all()
        )

    @staticmethod
    def count_by_grade():
        return (
            db.session.query(Member.grade, func.count(Member.id))
            .group_by(Member.grade)
            .all()
        )
