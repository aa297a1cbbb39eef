import json
from pathlib import Path

import pytest
from wordgame.stats import (
    JsonFileStore, MemoryStore, StatsRecord, StatsTracker,
    distribution_bars, highlight_row, mean_attempts, render_summary,
)
from wordgame.config import STATS_KEY


class BrokenStore:
    def get(self, key):
        raise OSError("disk gone")

    def set(self, key, value):
        raise OSError("disk gone")


def _play(tracker, results):
    for won, attempts in results:
        tracker.record_result(won, attempts)


def test_fresh_tracker_is_zeroed():
    t = StatsTracker()
    assert t.record == StatsRecord()
    assert t.record.guess_distribution == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0, 6: 0}
    assert t.win_percentage() == 0


def test_sequence_of_results():
    t = StatsTracker()
    _play(t, [(True, 3), (True, 1), (False, 6), (True, 3), (False, 6)])
    rec = t.record
    assert rec.games_played == 5
    assert rec.wins == 3
    assert sum(rec.guess_distribution.values()) == 3
    assert rec.guess_distribution[1] == 1 and rec.guess_distribution[3] == 2
    assert rec.current_streak == 0
    assert rec.max_streak == 2
    rec.check()


def test_loss_after_streak_resets_current_only():
    t = StatsTracker()
    _play(t, [(True, 2)] * 4 + [(False, 6)])
    assert t.record.current_streak == 0
    assert t.record.max_streak == 4
    _play(t, [(True, 5)])
    assert (t.record.current_streak, t.record.max_streak) == (1, 4)


@pytest.mark.parametrize("wins,losses,expected", [
    (1, 7, 13),   # 12.5 rounds up
    (2, 1, 67),
    (1, 2, 33),
    (3, 0, 100),
    (0, 4, 0),
])
def test_win_percentage(wins, losses, expected):
    t = StatsTracker()
    _play(t, [(True, 4)] * wins + [(False, 6)] * losses)
    assert t.win_percentage() == expected


def test_record_result_persists_immediately():
    store = MemoryStore()
    t = StatsTracker(store)
    t.record_result(True, 2)
    data = json.loads(store.get(STATS_KEY))
    assert data["gamesPlayed"] == 1
    assert data["guessDistribution"]["2"] == 1
    assert StatsTracker(store).record == t.record


def test_load_after_save_is_identity():
    t = StatsTracker(MemoryStore())
    _play(t, [(True, 1), (False, 6), (True, 6)])
    assert t.save() is True
    assert t.load() == t.record


@pytest.mark.parametrize("payload", [
    "not json",
    "[1, 2, 3]",
    '{"gamesPlayed": "x", "wins": 0, "currentStreak": 0, "maxStreak": 0}',
    '{"gamesPlayed": 1, "wins": 2, "currentStreak": 0, "maxStreak": 0}',
    '{"gamesPlayed": 3, "wins": 2, "currentStreak": 2, "maxStreak": 1}',
    '{"gamesPlayed": 3, "wins": 1, "currentStreak": 0, "maxStreak": 1, "guessDistribution": {"2": 3}}',
    '{"gamesPlayed": 1, "wins": 1, "currentStreak": 1, "maxStreak": 1, "guessDistribution": {"9": 1}}',
    '{"wins": 0}',
    pytest.param("[" * 100000 + "]" * 100000, id="deeply-nested-array"),
])
def test_malformed_data_loads_as_default(payload):
    t = StatsTracker(MemoryStore({STATS_KEY: payload}))
    assert t.record == StatsRecord()


def test_partial_distribution_is_filled():
    payload = json.dumps({"gamesPlayed": 2, "wins": 1, "currentStreak": 1, "maxStreak": 1,
                          "guessDistribution": {"4": 1}})
    t = StatsTracker(MemoryStore({STATS_KEY: payload}))
    assert t.record.guess_distribution == {1: 0, 2: 0, 3: 0, 4: 1, 5: 0, 6: 0}


def test_store_failures_are_not_fatal():
    t = StatsTracker(BrokenStore())
    assert t.record == StatsRecord()
    t.record_result(True, 3)
    assert t.record.wins == 1
    assert t.save() is False


def test_attempts_out_of_range():
    t = StatsTracker()
    with pytest.raises(ValueError):
        t.record_result(True, 0)
    with pytest.raises(ValueError):
        t.record_result(False, 7)
    assert t.record.games_played == 0


def test_json_file_store_roundtrip(tmp_path: Path):
    path = tmp_path / "nested" / "stats.json"
    store = JsonFileStore(path)
    assert store.get("k") is None
    assert store.set("k", "v") is True
    assert store.set("other", "w") is True
    assert JsonFileStore(path).get("k") == "v"
    assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v", "other": "w"}


def test_json_file_store_bad_file(tmp_path: Path):
    path = tmp_path / "stats.json"
    path.write_text("{oops", encoding="utf-8")
    store = JsonFileStore(path)
    assert store.get("k") is None
    blocker = tmp_path / "file.txt"
    blocker.write_text("x", encoding="utf-8")
    assert JsonFileStore(blocker / "stats.json").set("k", "v") is False


def test_tracker_over_file_store(tmp_path: Path):
    path = tmp_path / "stats.json"
    _play(StatsTracker(JsonFileStore(path)), [(True, 2), (True, 3)])
    again = StatsTracker(JsonFileStore(path))
    assert again.record.wins == 2
    assert again.record.current_streak == 2


def test_summary_helpers():
    rec = StatsRecord()
    assert distribution_bars(rec) == {n: 0.0 for n in range(1, 7)}
    assert mean_attempts(rec) == 0.0

    t = StatsTracker()
    _play(t, [(True, 1), (True, 3), (True, 3)])
    bars = distribution_bars(t.record)
    assert bars[3] == 100.0 and bars[1] == 50.0 and bars[6] == 0.0
    assert mean_attempts(t.record) == pytest.approx(7 / 3)
    assert highlight_row(t.record, True, 3) == 3
    assert highlight_row(t.record, False, 6) is None

    text = render_summary(t.record, t.win_percentage())
    assert text.splitlines()[0].startswith("Played 3 | Win % 100")
    assert len(text.splitlines()) == 7
