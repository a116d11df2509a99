from datetime import datetime
from librarydesk.extensions import db


class BorrowRecord(db.Model):
    __tablename__ = "borrow_records"

    id = db.Column(db.Integer, primary_key=True)

    # üye başına tek aktif ödünç: unique index
    stud_id = db.Column(db.String(64), nullable=False, unique=True, index=True)

    name = db.Column(db.String(200), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    grade = db.Column(db.String(20), nullable=False)
    section = db.Column(db.String(50), nullable=False)

    # ödünç anındaki kitap bilgisinin kopyası (shelf'e FK değil)
    book = db.Column(db.JSON, nullable=False)
    book_title = db.Column(db.String(500), nullable=False, index=True)
    book_key = db.Column(db.String(200), nullable=True, index=True)

    duration = db.Column(db.String(20), nullable=False)  # 3-days / 1-week / 2-week / 1-month
    return_date = db.Column(db.DateTime, nullable=False)
    is_good = db.Column(db.Boolean, nullable=False, default=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def first_isbn(self):
        isbns = (self.book or {}).get("isbn") or []
        return isbns[0] if isbns else "N/A"
