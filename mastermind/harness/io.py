"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Codes are written as letters (ADBC) and ratings as marker strings (xx.).
An empty rating is written as "-" so spreadsheets don't show a blank cell.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from mastermind.engine import GameConfig, format_code, format_rating


def write_csv(results: List[Dict], path: str, config: GameConfig) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, size, colors, secret, success, guesses, time_ms,
      guess_1, rating_1, ..., guess_K, rating_K
    where K is the longest game in the batch.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turns = max((len(r.get("history", [])) for r in results), default=0)
    fields = ["solver", "size", "colors", "secret", "success", "guesses", "time_ms"]
    for i in range(1, turns + 1):
        fields += [f"guess_{i}", f"rating_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "size": config.size,
                "colors": config.num_colors,
                "secret": format_code(r["secret"], config),
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            hist = r.get("history", [])
            for i in range(1, turns + 1):
                if i <= len(hist):
                    guess, exact, color = hist[i - 1]
                    row[f"guess_{i}"] = format_code(guess, config)
                    row[f"rating_{i}"] = format_rating(exact, color) or "-"
                else:
                    row[f"guess_{i}"] = ""
                    row[f"rating_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, size, colors, threads, seed, sample, outdir)
      - num_cases, solver_id, mean_guesses, max_guesses
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
