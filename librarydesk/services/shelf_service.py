from datetime import datetime
from uuid import uuid4

from flask import current_app
from sqlalchemy.exc import IntegrityError

from librarydesk.models.shelf_item import ShelfItem
from librarydesk.repositories.borrow_repo import BorrowRepo
from librarydesk.repositories.shelf_repo import ShelfRepo
from librarydesk.schemas import ManualShelfAdd, ShelfAdd
from librarydesk.utils.errors import Conflict, NotFound

PLACEHOLDER_COVER = "https://covers.openlibrary.org/b/id/7898938-L.jpg"


class ShelfService:
    @staticmethod
    def list_items():
        return ShelfRepo.list_all()

    @staticmethod
    def _store(key: str, book_data: dict) -> ShelfItem:
        if ShelfRepo.get_by_key(key):
            raise Conflict(
                "This book (identified by its unique key) already exists on the shelf.",
                details={"identifierKey": key},
            )

        item = ShelfItem(identifier_key=key, book_data=book_data, date_added=datetime.utcnow())
        try:
            ShelfRepo.create(item)
        except IntegrityError:
            ShelfRepo.rollback()
            raise Conflict(
                "This book (identified by its unique key) already exists on the shelf.",
                details={"identifierKey": key},
            ) from None

        current_app.logger.info(f"[shelf] added id={item.id} key={key}")
        return item

    @staticmethod
    def add_book(payload: ShelfAdd) -> ShelfItem:
        return ShelfService._store(payload.book.key, payload.book.model_dump())

    @staticmethod
    def add_manual(payload: ManualShelfAdd) -> ShelfItem:
        key = f"manual-{uuid4().hex}"
        return ShelfService._store(key, {
            "key": key,
            "title": payload.book_name,
            "author_name": [payload.book_author],
            "isbn": [],
            "subject": [],
            "coverImageUrl": PLACEHOLDER_COVER,
            "sourceApi": "Manual",
        })

    @staticmethod
    def delete_item(item_id: int):
        item = ShelfRepo.get(item_id)
        if not item:
            raise NotFound("Book not found")

        loan = BorrowRepo.find_borrowing_book(item.identifier_key, item.title)
        if loan:
            raise Conflict(
                "The book is currently borrowed and cannot be deleted.",
                details={"studentId": loan.stud_id, "returnDate": loan.return_date.isoformat()},
            )

        key = item.identifier_key
        ShelfRepo.delete(item)
        current_app.logger.info(f"[shelf] deleted id={item_id} key={key}")
