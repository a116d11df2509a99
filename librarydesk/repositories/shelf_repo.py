from librarydesk.models.shelf_item import ShelfItem
from librarydesk.extensions import db


class ShelfRepo:
    @staticmethod
    def list_all():
        return ShelfItem.query.order_by(ShelfItem.date_added.desc(), ShelfItem.id.desc()).all()

    @staticmethod
    def get(item_id: int):
        return db.session.get(ShelfItem, item_id)

    @staticmethod
    def get_by_key(identifier_key: str):
        return ShelfItem.query.filter_by(identifier_key=identifier_key).first()

    @staticmethod
    def create(item: ShelfItem):
        db.session.add(item)
        db.session.commit()
        return item

    @staticmethod
    def delete(item: ShelfItem):
        db.session.delete(item)
        db.session.commit()

    @staticmethod
    def rollback():
        db.session.rollback()

    @staticmethod
    def count_all() -> int:
        return ShelfItem.query.count()
