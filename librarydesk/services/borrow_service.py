from datetime import date, datetime

from flask import current_app
from sqlalchemy.exc import IntegrityError

from librarydesk.models.borrow_record import BorrowRecord
from librarydesk.repositories.borrow_repo import BorrowRepo
from librarydesk.schemas import BorrowCreate, ExtendReturnDate
from librarydesk.utils.dates import DURATIONS, due_date_for
from librarydesk.utils.errors import Conflict, NotFound, ValidationFailed


class BorrowService:
    @staticmethod
    def list_records():
        return BorrowRepo.list_all()

    @staticmethod
    def search_by_name(name: str | None):
        if not name or not name.strip():
            raise ValidationFailed("Name query parameter is required")

        rows = BorrowRepo.search_by_name(name.strip())
        if not rows:
            raise NotFound("No students found")
        return rows

    @staticmethod
    def return_date_for(duration: str, today: date | None = None) -> date:
        try:
            return due_date_for(duration, today or datetime.utcnow().date())
        except ValueError as e:
            raise ValidationFailed(str(e), errors=[{"field": "duration", "message": f"expected one of {', '.join(DURATIONS)}"}])

    @staticmethod
    def _loan_conflict(existing: BorrowRecord) -> Conflict:
        title = (existing.book or {}).get("title")
        isbn = existing.first_isbn
        return Conflict(
            f"This student (ID: {existing.stud_id}) already has an active book borrowed "
            f"(Book: {title}, ISBN: {isbn}). A student can only borrow one book at a time.",
            details={
                "studentId": existing.stud_id,
                "bookTitle": title,
                "bookIsbn": isbn,
                "returnDate": existing.return_date.isoformat(),
            },
        )

    @staticmethod
    def create_borrow(payload: BorrowCreate) -> BorrowRecord:
        # ön kontrol sadece mevcut ödünç bilgisini raporlamak için; asıl garanti stud_id unique index'i
        existing = BorrowRepo.get_by_member(payload.stud_id)
        if existing:
            current_app.logger.warning(f"[borrow] stud_id={payload.stud_id} already has record id={existing.id}")
            raise BorrowService._loan_conflict(existing)

        book_key = (payload.book.key or "").strip() or None
        record = BorrowRecord(
            stud_id=payload.stud_id,
            name=payload.name,
            age=payload.age,
            grade=payload.grade,
            section=payload.section,
            book=payload.book.model_dump(exclude_none=True),
            book_title=payload.book.title,
            book_key=book_key,
            duration=payload.duration,
            return_date=payload.return_date.to_datetime(),
            is_good=payload.is_good,
        )

        try:
            BorrowRepo.create(record)
        except IntegrityError:
            # eşzamanlı istek kazandı
            BorrowRepo.rollback()
            current_app.logger.warning(f"[borrow] unique index rejected stud_id={payload.stud_id}")
            winner = BorrowRepo.get_by_member(payload.stud_id)
            if winner:
                raise BorrowService._loan_conflict(winner) from None
            raise Conflict(
                "This borrowing record violates a unique constraint.",
                details={"studentId": payload.stud_id},
            ) from None

        current_app.logger.info(
            f"[borrow] created id={record.id} stud_id={record.stud_id} due={record.return_date.date()}"
        )
        return record

    @staticmethod
    def return_book(record_id: int) -> str:
        record = BorrowRepo.get(record_id)
        if not record:
            raise NotFound("Borrow record not found")

        stud_id = record.stud_id
        BorrowRepo.delete(record)
        current_app.logger.info(f"[borrow] returned id={record_id} stud_id={stud_id}")
        return stud_id

    @staticmethod
    def extend_return_date(record_id: int, payload: ExtendReturnDate) -> BorrowRecord:
        record = BorrowRepo.get(record_id)
        if not record:
            raise NotFound("Borrow record not found")

        new_date = payload.new_return_date
        if new_date < record.return_date:
            raise ValidationFailed(
                "New return date cannot be earlier than the current return date",
                errors=[{
                    "field": "newReturnDate",
                    "message": f"must be on or after {record.return_date.isoformat()}",
                }],
            )

        # isGood'a dokunulmaz, bir sonraki refresh'te düzelir
        record.return_date = new_date
        BorrowRepo.commit()
        current_app.logger.info(f"[borrow] extended id={record_id} due={new_date.isoformat()}")
        return record

    @staticmethod
    def refresh_statuses(now: datetime | None = None) -> dict:
        """Tüm kayıtlarda isGood = return_date >= now; değişmeyen kayıtlar da yazılır."""
        now = now or datetime.utcnow()
        records = BorrowRepo.list_all()

        overdue = 0
        for r in records:
            r.is_good = r.return_date >= now
            r.updated_at = now
            if not r.is_good:
                overdue += 1

        # tek commit
        BorrowRepo.commit()
        return {"processed": len(records), "overdue": overdue}
