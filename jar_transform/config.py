from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

ENV_RESULTS_DIR = "JAR_ANALYZER_RESULTS_DIR"
ENV_MAX_WORKERS = "JAR_ANALYZER_MAX_WORKERS"
ENV_LOG_LEVEL = "JAR_ANALYZER_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    results_dir: Path
    max_workers: int | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        results_env = env.get(ENV_RESULTS_DIR)
        if results_env:
            results_dir = Path(results_env).expanduser().resolve()
        else:
            results_dir = (Path.cwd() / "results").resolve()

        max_workers: int | None = None
        raw = (env.get(ENV_MAX_WORKERS) or "").strip()
        if raw:
            try:
                max_workers = int(raw)
            except ValueError:
                raise ValueError(f"{ENV_MAX_WORKERS} must be a positive integer, got {raw!r}") from None
            if max_workers < 1:
                raise ValueError(f"{ENV_MAX_WORKERS} must be a positive integer, got {raw!r}")

        log_level = (env.get(ENV_LOG_LEVEL) or "WARNING").strip().upper()
        return cls(results_dir=results_dir, max_workers=max_workers, log_level=log_level)
