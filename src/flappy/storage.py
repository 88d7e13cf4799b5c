"""
storage.py: Key/value persistence for best score and preferences.
"""

import logging
import sqlite3
from typing import Optional

from .constants import DB_FILE

logger = logging.getLogger(__name__)


class Database:
    """Handles all interaction with the SQLite database."""
    def __init__(self, db_file: str = DB_FILE):
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()

    def setup(self):
        """Creates the settings table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Settings (
                key TEXT PRIMARY KEY,
                value TEXT
            )
        """)
        self.conn.commit()

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        self.cur.execute("SELECT value FROM Settings WHERE key=?", (key,))
        row = self.cur.fetchone()
        return row[0] if row else default

    def set(self, key: str, value: str):
        """Stores a value. Last write wins."""
        self.cur.execute(
            "INSERT OR REPLACE INTO Settings (key, value) VALUES (?, ?)", (key, value))
        self.conn.commit()

    def close(self):
        self.conn.close()


def open_storage(db_file: str = DB_FILE) -> Optional[Database]:
    """Opens the database, or returns None so the session runs in memory only."""
    try:
        return Database(db_file)
    except sqlite3.Error as e:
        logger.warning("Could not open %s, scores will not be saved: %s", db_file, e)
        return None
