from flappy.audio import AudioManager
from flappy.scores import ScoreBridge
from flappy.storage import Database, open_storage


def test_missing_key_returns_default(db):
    assert db.get("nothing") is None
    assert db.get("nothing", "0") == "0"


def test_last_write_wins(db):
    db.set("flappybird_best", "3")
    db.set("flappybird_best", "9")
    assert db.get("flappybird_best") == "9"


def test_values_survive_reopen(tmp_path):
    path = str(tmp_path / "flappy.db")
    first = Database(path)
    first.set("flappybird_muted", "true")
    first.close()

    second = Database(path)
    assert second.get("flappybird_muted") == "true"
    second.close()


def test_unopenable_database_runs_in_memory(tmp_path):
    storage = open_storage(str(tmp_path / "missing_dir" / "flappy.db"))
    assert storage is None

    bridge = ScoreBridge(storage)
    audio = AudioManager(storage)
    assert bridge.current_best() == 0
    assert bridge.record_pass() is True
    assert bridge.current_best() == 1
    assert audio.toggle_mute() is True


def test_open_storage_returns_database(tmp_path):
    storage = open_storage(str(tmp_path / "flappy.db"))
    storage.set("flappybird_best", "2")
    assert storage.get("flappybird_best") == "2"
    storage.close()
