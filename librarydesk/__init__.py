from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from librarydesk.config import Config
from librarydesk.extensions import db, migrate


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # 1) db init (db.session için şart)
    db.init_app(app)
    migrate.init_app(app, db)

    # 2) tablolar
    from librarydesk.models import ensure_schema
    ensure_schema(app)

    # 3) API blueprintleri
    from librarydesk.controllers.borrow_controller import borrow_bp
    from librarydesk.controllers.member_controller import member_bp
    from librarydesk.controllers.shelf_controller import shelf_bp
    from librarydesk.controllers.statistics_controller import stats_bp
    from librarydesk.controllers.book_lookup_controller import lookup_bp
    app.register_blueprint(borrow_bp)
    app.register_blueprint(member_bp)
    app.register_blueprint(shelf_bp)
    app.register_blueprint(stats_bp)
    app.register_blueprint(lookup_bp, url_prefix="/api")

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({"success": False, "message": e.description}), e.code

    @app.errorhandler(Exception)
    def unexpected_error(e):
        db.session.rollback()
        app.logger.exception(f"[app] Unhandled error: {e}")
        return jsonify({"success": False, "message": "Internal Server Error"}), 500

    # Scheduler (isGood yenileme)
    from librarydesk.tasks.scheduler import start_scheduler
    start_scheduler(app)

    return app
