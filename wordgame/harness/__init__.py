from .core import play_session, run_batch
from .io import write_csv, write_manifest, timestamp_id
from .players import RandomConsistentPlayer

__all__ = [
    "play_session", "run_batch", "write_csv", "write_manifest", "timestamp_id",
    "RandomConsistentPlayer",
]
