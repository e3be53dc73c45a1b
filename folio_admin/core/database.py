import sqlite3


class Database:
    """Thin SQLite access point shared by the logging service."""

    @staticmethod
    def connect(path):
        return sqlite3.connect(path)
