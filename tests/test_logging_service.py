"""
SQLite-backed application log.
"""

from datetime import datetime, timedelta

from folio_admin.core.database import Database
from folio_admin.core.logging_service import LoggingService


def test_log_rows_carry_request_context(app):
    with app.test_request_context("/projects", headers={"User-Agent": "pytest"}):
        LoggingService.info("projects", "Listed projects", {"count": 3})
        logs = LoggingService.get_recent_logs(limit=1)

    assert logs[0]["level"] == "INFO"
    assert logs[0]["source"] == "projects"
    assert logs[0]["request_path"] == "/projects"
    assert '"count": 3' in logs[0]["details"]


def test_api_call_level_follows_status(app):
    with app.app_context():
        LoggingService.log_api_call("api", "/projects", "GET", 200)
        LoggingService.log_api_call("api", "/projects/p1", "DELETE", 404)
        LoggingService.log_api_call("api", "/messages", "GET", 503)

        assert [log["level"] for log in LoggingService.get_recent_logs(limit=3)] == [
            "ERROR", "WARNING", "INFO",
        ]
        assert len(LoggingService.get_recent_logs(level="warning")) == 1


def test_cleanup_old_logs(app):
    with app.app_context():
        LoggingService.info("system", "fresh entry")
        old = (datetime.now() - timedelta(days=90)).isoformat()
        with Database.connect(app.config["LOG_DB"]) as conn:
            conn.execute(
                "INSERT INTO app_logs (timestamp, level, source, message) VALUES (?, ?, ?, ?)",
                (old, "INFO", "system", "stale entry"),
            )
            conn.commit()

        assert LoggingService.cleanup_old_logs(days_to_keep=30) == 1
        messages = [log["message"] for log in LoggingService.get_recent_logs()]

    assert "fresh entry" in messages
    assert "stale entry" not in messages


def test_database_failure_falls_back_to_console(app, tmp_path, capsys):
    app.config["LOG_DB"] = str(tmp_path)  # a directory cannot be opened as a database

    with app.app_context():
        LoggingService.error("api", "Backend unreachable")

    out = capsys.readouterr().out
    assert "[ERROR] [api] Backend unreachable" in out
