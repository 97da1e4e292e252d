"""Load the input stylesheet, expanding it with a preprocessor when asked."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from untangle.errors import InputFileError, PreprocessorError

logger = logging.getLogger(__name__)


def read_stylesheet(path: str | Path) -> str:
    """Read stylesheet text verbatim."""
    p = Path(path)
    if not p.is_file():
        raise InputFileError(f"File doesn't exist: {p}", path=str(p))
    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f"Can't read {p}: {exc}", path=str(p), cause=exc) from exc


def compile_stylesheet(path: str | Path, command: str = "lessc", timeout: float = 120.0) -> str:
    """Run the preprocessor on *path* and return the expanded stylesheet.

    Variables, mixins and extends are resolved by the preprocessor so that
    the parsed rules carry their final selectors.
    """
    p = Path(path)
    if not p.is_file():
        raise InputFileError(f"File doesn't exist: {p}", path=str(p))

    argv = [*shlex.split(command), str(p)]
    logger.debug("Compiling with: %s", " ".join(argv))
    try:
        result = subprocess.run(argv, capture_output=True, text=True, timeout=timeout)
    except subprocess.TimeoutExpired as exc:
        raise PreprocessorError(
            f"Compiling timed out after {timeout}s", command=argv, cause=exc
        ) from exc
    except OSError as exc:
        raise PreprocessorError(
            f"Compiling failed: can't run {argv[0]}: {exc}", command=argv, cause=exc
        ) from exc

    if result.returncode != 0:
        raise PreprocessorError(
            f"Compiling failed with exit status {result.returncode}",
            command=argv,
            exit_code=result.returncode,
            stderr=result.stderr,
        )
    return result.stdout


def load_stylesheet(
    path: str | Path,
    *,
    precompile: bool = True,
    command: str = "lessc",
    timeout: float = 120.0,
) -> str:
    if precompile:
        return compile_stylesheet(path, command=command, timeout=timeout)
    return read_stylesheet(path)
