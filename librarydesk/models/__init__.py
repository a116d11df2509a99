from librarydesk.extensions import db
from librarydesk.models.borrow_record import BorrowRecord
from librarydesk.models.member import Member
from librarydesk.models.shelf_item import ShelfItem

__all__ = ["BorrowRecord", "Member", "ShelfItem", "ensure_schema"]


def ensure_schema(app):
    """AUTO_CREATE_TABLES açıksa tabloları (ve stud_id unique index'ini) oluşturur."""
    if not app.config.get("AUTO_CREATE_TABLES"):
        return
    with app.app_context():
        db.create_all()
        app.logger.info("[schema] Tables ensured.")
