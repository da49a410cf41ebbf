"""Locate a Go package's source files through the go toolchain."""

from __future__ import annotations

import json
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Tuple

from ..errors import ResolutionError
from ..logging import get_logger


@dataclass(frozen=True)
class GoPackage:
    """Resolved package: its directory and build-selected source files."""

    import_path: str
    name: str
    dir: Path
    go_files: Tuple[str, ...]

    def paths(self) -> list[Path]:
        return [self.dir / filename for filename in self.go_files]


class PackageResolver:
    """Resolves import paths with ``go list -json``.

    ``GoFiles`` is already filtered by the host's build constraints and never
    includes ``_test.go`` files.
    """

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("resolver")

    def resolve(self, package: str) -> GoPackage:
        args = ["go", "list", "-json", package]
        try:
            output = self._runner(args)
        except FileNotFoundError as exc:
            raise ResolutionError(
                f"cannot resolve package {package!r}: go toolchain not found ({exc})"
            ) from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise ResolutionError(f"cannot resolve package {package!r}: {detail}") from exc

        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            raise ResolutionError(
                f"cannot resolve package {package!r}: unreadable go list output ({exc})"
            ) from exc
        if not isinstance(data, dict):
            raise ResolutionError(f"cannot resolve package {package!r}: unexpected go list output")

        error = data.get("Error")
        if isinstance(error, dict):
            raise ResolutionError(
                f"cannot resolve package {package!r}: {error.get('Err', 'unknown error')}"
            )

        directory = data.get("Dir")
        if not isinstance(directory, str) or not directory:
            raise ResolutionError(f"cannot resolve package {package!r}: no source directory")

        go_files = tuple(str(name) for name in data.get("GoFiles") or [])
        resolved = GoPackage(
            import_path=str(data.get("ImportPath") or package),
            name=str(data.get("Name") or package.rsplit("/", 1)[-1]),
            dir=Path(directory),
            go_files=go_files,
        )
        self.logger.info(
            "Resolved %s (package %s) to %s (%d files)",
            package,
            resolved.name,
            resolved.dir,
            len(go_files),
        )
        return resolved

    @staticmethod
    def _default_runner(args: Iterable[str]) -> str:
        completed = subprocess.run(
            list(args),
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout


__all__ = ["GoPackage", "PackageResolver"]
