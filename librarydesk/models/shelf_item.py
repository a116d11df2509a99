from datetime import datetime
from librarydesk.extensions import db


class ShelfItem(db.Model):
    __tablename__ = "shelf_items"

    id = db.Column(db.Integer, primary_key=True)

    # Google Books / Open Library anahtarı, ya da manual-<hex>
    identifier_key = db.Column(db.String(200), nullable=False, unique=True, index=True)
    book_data = db.Column(db.JSON, nullable=False)

    date_added = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    @property
    def title(self):
        return (self.book_data or {}).get("title")
