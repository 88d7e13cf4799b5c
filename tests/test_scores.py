import sqlite3

from flappy.constants import BEST_SCORE_KEY
from flappy.scores import ScoreBridge
from flappy.storage import Database


class FailingStorage:
    def __init__(self, best=None):
        self.best = best

    def get(self, key, default=None):
        return self.best

    def set(self, key, value):
        raise sqlite3.OperationalError("database is locked")


def test_best_defaults_to_zero(db):
    assert ScoreBridge(db).current_best() == 0


def test_best_is_seeded_from_storage(db):
    db.set(BEST_SCORE_KEY, "7")
    assert ScoreBridge(db).current_best() == 7


def test_malformed_best_is_ignored(db):
    db.set(BEST_SCORE_KEY, "seven")
    assert ScoreBridge(db).current_best() == 0


def test_unreadable_storage_falls_back_to_zero():
    database = Database(":memory:")
    database.close()
    assert ScoreBridge(database).current_best() == 0


def test_record_pass_reports_new_bests(db):
    db.set(BEST_SCORE_KEY, "2")
    bridge = ScoreBridge(db)
    assert [bridge.record_pass() for _ in range(4)] == [False, False, True, True]
    assert bridge.score == 4
    assert bridge.current_best() == 4
    assert db.get(BEST_SCORE_KEY) == "4"


def test_failed_write_keeps_in_memory_best():
    bridge = ScoreBridge(FailingStorage(best="1"))
    bridge.record_pass()
    assert bridge.record_pass() is True
    assert bridge.current_best() == 2


def test_best_never_decreases_across_runs(db):
    bridge = ScoreBridge(db)
    history = []
    for run_length in (3, 1, 5, 0, 2):
        bridge.reset_run()
        for _ in range(run_length):
            bridge.record_pass()
        history.append(bridge.current_best())
    assert history == [3, 3, 5, 5, 5]
    assert db.get(BEST_SCORE_KEY) == "5"


def test_without_storage():
    bridge = ScoreBridge()
    assert bridge.record_pass()
    assert bridge.current_best() == 1
