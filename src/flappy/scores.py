"""
scores.py: Current score and best score, with best-effort persistence.
"""

import logging
import sqlite3
from typing import Optional

from .constants import BEST_SCORE_KEY
from .storage import Database

logger = logging.getLogger(__name__)


class ScoreBridge:
    """
    Tracks the running score and the best score for the process lifetime.

    The best score is read once from storage at construction. Every new best
    is written back immediately; a failed read or write only costs persistence,
    the in-memory best stays authoritative for the session.
    """

    def __init__(self, storage: Optional[Database] = None):
        self.storage = storage
        self.score = 0
        self._best = self._load_best()

    def _load_best(self) -> int:
        if self.storage is None:
            return 0
        try:
            raw = self.storage.get(BEST_SCORE_KEY)
        except sqlite3.Error as e:
            logger.warning("Could not read best score: %s", e)
            return 0
        try:
            return max(int(raw), 0) if raw is not None else 0
        except ValueError:
            logger.warning("Ignoring malformed best score %r", raw)
            return 0

    def current_best(self) -> int:
        return self._best

    def reset_run(self):
        self.score = 0

    def record_pass(self) -> bool:
        """Counts one passed pipe. Returns True if that set a new best."""
        self.score += 1
        if self.score <= self._best:
            return False

        self._best = self.score
        self._save_best()
        return True

    def _save_best(self):
        if self.storage is None:
            return
        try:
            self.storage.set(BEST_SCORE_KEY, str(self._best))
        except sqlite3.Error as e:
            logger.warning("Could not save best score %d: %s", self._best, e)
