# librarydesk/tasks/scheduler.py
from __future__ import annotations

import atexit
import os

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger


def start_scheduler(app):
    """
    isGood yenileme job'unu periyodik çalıştırır.
    - SCHEDULER_ENABLED kapalıysa (testler) hiçbir şey yapmaz.
    - Debug reloader'da çift çalışmayı engeller.
    - Süreç kapanırken scheduler'ı kapatır.
    """
    if not app.config.get("SCHEDULER_ENABLED"):
        return None

    # Werkzeug reloader varsa WERKZEUG_RUN_MAIN=true olan process gerçek process'tir.
    if app.debug and os.environ.get("WERKZEUG_RUN_MAIN") != "true":
        app.logger.info("[scheduler] Debug reloader secondary process: scheduler skipped.")
        return None

    # circular import olmasın
    from librarydesk.tasks.status_refresh import run_status_refresh_job

    minutes = app.config.get("STATUS_REFRESH_MINUTES", 60)
    scheduler = BackgroundScheduler(timezone="UTC")
    scheduler.add_job(
        func=run_status_refresh_job,
        args=[app],
        trigger=IntervalTrigger(minutes=minutes),
        id="status_refresh_job",
        replace_existing=True,
        max_instances=1,        # aynı job üst üste binmesin
        coalesce=True,          # kaçırılanları tek seferde toparla
        misfire_grace_time=120
    )

    scheduler.start()
    app.logger.info(f"[scheduler] Status refresh job started (every {minutes} minutes).")

    app.extensions["apscheduler"] = scheduler
    atexit.register(lambda: scheduler.shutdown(wait=False) if scheduler.running else None)
    return scheduler
