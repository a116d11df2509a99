from datetime import datetime
from sqlalchemy import func, or_, and_
from librarydesk.models.borrow_record import BorrowRecord
from librarydesk.extensions import db


class BorrowRepo:
    @staticmethod
    def get(record_id: int):
        return db.session.get(BorrowRecord, record_id)

    @staticmethod
    def get_by_member(stud_id: str):
        return BorrowRecord.query.filter_by(stud_id=stud_id).first()

    @staticmethod
    def list_all():
        return BorrowRecord.query.order_by(BorrowRecord.id.desc()).all()

    @staticmethod
    def search_by_name(fragment: str):
        return (
            BorrowRecord.query
            .filter(BorrowRecord.name.icontains(fragment, autoescape=True))
            .order_by(BorrowRecord.id.desc())
            .all()
        )

    @staticmethod
    def find_borrowing_book(identifier_key: str, title: str | None):
        """Shelf kaydını ödünçte tutan kayıt: önce key, key yoksa başlık (case-insensitive)."""
        conditions = [BorrowRecord.book_key == identifier_key]
        if title:
            conditions.append(and_(
                BorrowRecord.book_key.is_(None),
                func.lower(BorrowRecord.book_title) == title.strip().lower(),
            ))
        return BorrowRecord.query.filter(or_(*conditions)).first()

    @staticmethod
    def create(record: BorrowRecord):
        db.session.add(record)
        db.session.commit()
        return record

    @staticmethod
    def delete(record: BorrowRecord):
        db.session.delete(record)
        db.session.commit()

    @staticmethod
    def commit():
        db.session.commit()

    @staticmethod
    def rollback():
        db.session.rollback()

    @staticmethod
    def count_all() -> int:
        return BorrowRecord.query.count()

    @staticmethod
    def count_overdue(now: datetime) -> int:
        return BorrowRecord.query.filter(BorrowRecord.return_date < now).count()

    @staticmethod
    def count_by_duration():
        return (
            db.session.query(BorrowRecord.duration, func.count(BorrowRecord.id))
            .group_by(BorrowRecord.duration)
            .all()
        )
