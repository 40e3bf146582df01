from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from jar_tools.base import Scanner

from .artifacts import DirectoryOutputs, FileArtifact
from .errors import TransformError
from .transform import JarAnalyzerTransform
from .zip_utils import derive_output_name, is_jar_candidate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformOutcome:
    input_path: Path
    output_path: Path | None
    error: TransformError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def collect_jars(path: Path) -> list[Path]:
    """A single jar, or the jars found in the first level of a directory."""
    p = path.expanduser().resolve()
    if p.is_file():
        return [p]
    if p.is_dir():
        return [e for e in sorted(p.iterdir(), key=lambda x: x.name.lower()) if is_jar_candidate(e)]
    raise FileNotFoundError(f"input must be a jar file or a directory: {p}")


def resolve_workers(count: int, max_workers: int | None) -> int:
    if count <= 0:
        return 1
    if max_workers is None:
        return min(os.cpu_count() or 1, count)
    return max(1, min(max_workers, count))


def _check_distinct_outputs(inputs: list[Path]) -> None:
    seen: dict[str, Path] = {}
    for p in inputs:
        name = derive_output_name(p.name)
        if name in seen:
            raise ValueError(f"{seen[name]} and {p} would both be written to {name}")
        seen[name] = p


def _run_one(input_path: Path, output_dir: Path, scanner: Scanner | None) -> TransformOutcome:
    outputs = DirectoryOutputs(output_dir)
    try:
        JarAnalyzerTransform(FileArtifact(input_path), scanner).transform(outputs)
    except TransformError as e:
        return TransformOutcome(input_path=input_path, output_path=None, error=e)
    return TransformOutcome(input_path=input_path, output_path=outputs.registered[0])


def run_transforms(
    inputs: Iterable[Path],
    *,
    output_dir: Path,
    max_workers: int | None = None,
    scanner: Scanner | None = None,
) -> list[TransformOutcome]:
    """Transform every input jar into ``output_dir``.

    Outcomes are returned in input order. A failed artifact is reported
    through its outcome's ``error`` and does not stop the others.
    """
    items = [p.resolve() for p in inputs]
    if not items:
        logger.info("no jars to transform")
        return []
    _check_distinct_outputs(items)

    workers = resolve_workers(len(items), max_workers)
    logger.info("transforming %d jar(s) with %d worker(s)", len(items), workers)
    if workers == 1:
        return [_run_one(p, output_dir, scanner) for p in items]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda p: _run_one(p, output_dir, scanner), items))
