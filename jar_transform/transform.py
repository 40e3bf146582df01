from __future__ import annotations

import logging

from jar_tools.base import Scanner
from jar_tools.scanner import PackageScanner

from .artifacts import ArtifactProvider, TransformOutputs
from .errors import TransformError
from .zip_utils import JAR_SUFFIX, derive_output_name

logger = logging.getLogger(__name__)


class JarAnalyzerTransform:
    """Turns a jar artifact into a ``.properties`` file describing its packages.

    Holds no mutable state, so one instance per artifact can run on any thread.
    The input artifact is only ever read.
    """

    def __init__(self, input_artifact: ArtifactProvider, scanner: Scanner | None = None) -> None:
        self.input_artifact = input_artifact
        self.scanner: Scanner = scanner or PackageScanner()

    def transform(self, outputs: TransformOutputs) -> None:
        input_file = self.input_artifact.get()
        name = derive_output_name(input_file.name)
        if name == input_file.name:
            raise TransformError(f"not a {JAR_SUFFIX} artifact: {input_file}", input_file)
        output_file = outputs.file(name)
        if output_file.resolve() == input_file.resolve():
            raise TransformError(f"output would overwrite the input artifact: {input_file}", input_file)

        logger.info("scanning %s -> %s", input_file, output_file)
        try:
            self.scanner.scan(input_path=input_file, output_path=output_file)
        except OSError as e:
            try:
                output_file.unlink(missing_ok=True)
            except OSError as cleanup_error:
                logger.warning("could not remove %s: %s", output_file, cleanup_error)
            logger.error("transform of %s failed: %s", input_file, e)
            raise TransformError(f"failed to analyze {input_file}: {e}", input_file) from e
