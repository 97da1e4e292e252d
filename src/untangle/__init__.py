"""Untangle: attribute @media rules to the source files that own them."""
from __future__ import annotations

__version__ = "0.1.0"

from untangle.config import UntangleConfig  # noqa: E402
from untangle.errors import (  # noqa: E402
    InputFileError,
    PreprocessorError,
    SearchError,
    UntangleError,
)
from untangle.runner import run_pipeline  # noqa: E402

__all__ = [
    "__version__",
    "UntangleConfig",
    "UntangleError",
    "InputFileError",
    "PreprocessorError",
    "SearchError",
    "run_pipeline",
]
