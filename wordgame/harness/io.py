"""
I/O for autoplay runs.

- write_csv:      one row per game with guess/pattern columns.
- write_manifest: JSON manifest with run config, word-list report and stats.
- timestamp_id:   compact UTC run id for filenames.

Patterns are prefixed with an apostrophe to keep spreadsheet apps from
reading strings like "-GYY-" as formulas.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
from pathlib import Path
from typing import Dict, List

from wordgame.config import MAX_TURNS


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: Path | str, max_turns: int = MAX_TURNS) -> str:
    """
    Columns: game, secret, won, attempts, time_ms, guess_1, patt_1, ...
    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["game", "secret", "won", "attempts", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for n, r in enumerate(results, start=1):
            row = {
                "game": n,
                "secret": r["secret"],
                "won": r["won"],
                "attempts": r["attempts"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                g, patt = hist[i - 1] if i <= len(hist) else ("", "")
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = _excel_safe_pattern(patt)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: Path | str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """e.g. 20250820T024121Z"""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
