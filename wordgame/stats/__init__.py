from .record import StatsRecord
from .store import KeyValueStore, MemoryStore, JsonFileStore
from .tracker import StatsTracker
from .summary import distribution_bars, mean_attempts, highlight_row, render_summary

__all__ = [
    "StatsRecord", "KeyValueStore", "MemoryStore", "JsonFileStore", "StatsTracker",
    "distribution_bars", "mean_attempts", "highlight_row", "render_summary",
]
