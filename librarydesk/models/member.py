from datetime import datetime
from librarydesk.extensions import db


class Member(db.Model):
    __tablename__ = "members"

    id = db.Column(db.Integer, primary_key=True)
    stud_id = db.Column(db.String(64), nullable=False, unique=True, index=True)

    name = db.Column(db.String(200), nullable=False, index=True)
    parent_phone = db.Column(db.String(32), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    grade = db.Column(db.String(20), nullable=False)
    section = db.Column(db.String(50), nullable=False)

    level = db.Column(db.String(20), nullable=False, default="Undefined")  # Primary/Secondary/High School
    score = db.Column(db.Integer, nullable=False, default=10)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
