"""Search provider backed by ``git grep``."""

from __future__ import annotations

import os
import subprocess

from untangle.errors import SearchError

# git grep exits with status 1 when nothing matched.
_NO_MATCH_EXIT = 1


class GitGrepSearchProvider:
    """Runs ``git grep -F`` for each token inside a working tree.

    Fixed-string matching is used so selector punctuation (``.``, ``#``,
    ``[``) is never interpreted as a pattern.
    """

    def __init__(
        self,
        working_dir: str | None = None,
        timeout: float = 30.0,
        executable: str = "git",
    ) -> None:
        self._working_dir = working_dir
        self._timeout = timeout
        self._executable = executable

    @property
    def working_directory(self) -> str:
        """Directory that reported paths are relative to."""
        return self._working_dir or os.getcwd()

    def command_for(self, token: str, path_glob: str | None = None) -> list[str]:
        cmd = [self._executable, "grep", "-F", "-e", token]
        if path_glob:
            cmd.extend(["--", path_glob])
        return cmd

    def search(self, token: str, path_glob: str | None = None) -> list[str]:
        cmd = self.command_for(token, path_glob)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                cwd=self._working_dir,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise SearchError(
                f"Search timed out after {self._timeout}s",
                token=token,
                command=cmd,
                cause=exc,
            ) from exc
        except OSError as exc:
            raise SearchError(
                f"Search could not run: {exc}",
                token=token,
                command=cmd,
                cause=exc,
            ) from exc

        if result.returncode == _NO_MATCH_EXIT and not result.stderr.strip():
            return []
        if result.returncode != 0:
            raise SearchError(
                f"Search exited with status {result.returncode}: {result.stderr.strip()}",
                token=token,
                command=cmd,
            )
        return [line for line in result.stdout.splitlines() if line]
