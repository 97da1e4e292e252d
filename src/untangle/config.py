from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_CONCURRENCY = 10


@dataclass(frozen=True)
class UntangleConfig:
    input_path: str
    ignore: tuple[str, ...] = ()
    root_glob: str | None = None
    extension: str = "less"
    concurrency: int = DEFAULT_CONCURRENCY
    search_timeout: float = 30.0  # seconds, per search invocation
    preprocessor: str = "lessc"
    preprocess_timeout: float = 120.0  # seconds
    precompile: bool = True
    print_queries: bool = False
    show_unmatched: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {self.concurrency}")

    @property
    def effective_ignore(self) -> frozenset[str]:
        """Ignored paths, normalised, always including the input file."""
        return frozenset(os.path.normpath(p) for p in (self.input_path, *self.ignore))
