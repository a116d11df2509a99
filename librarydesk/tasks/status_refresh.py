# librarydesk/tasks/status_refresh.py
from flask import current_app

from librarydesk.extensions import db
from librarydesk.services.borrow_service import BorrowService


def run_status_refresh_job(app):
    """
    isGood bayrağını tüm ödünç kayıtları için yeniden hesaplar.
    Dashboard'daki PUT /update-student-status ile aynı işi yapar.
    """
    with app.app_context():
        try:
            summary = BorrowService.refresh_statuses()
            current_app.logger.info(
                f"[status_refresh] processed={summary['processed']} overdue={summary['overdue']}"
            )
            return summary
        except Exception as e:
            db.session.rollback()
            current_app.logger.exception(f"[status_refresh] Hata: {e}")
            return None
