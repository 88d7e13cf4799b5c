from flappy.__main__ import parse_args
from flappy.constants import DB_FILE, RENDER_FPS


def test_defaults():
    args = parse_args([])
    assert args.db == DB_FILE
    assert args.fps == RENDER_FPS
    assert args.mute is False
    assert args.log_level == "warning"


def test_options():
    args = parse_args(["--db", "/tmp/x.db", "--fps", "30", "--mute", "--log-level", "debug"])
    assert (args.db, args.fps, args.mute, args.log_level) == ("/tmp/x.db", 30, True, "debug")
