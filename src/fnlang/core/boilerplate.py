"""Writing starter project files for new functions.

The manifest is the guard: if it exists nothing is written, and since it is
always written first, a run that fails part way leaves a manifest behind and
the next attempt refuses to continue instead of mixing two generations.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from fnlang.core.errors import ManifestAlreadyExistsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoilerplateFile:
    relative_path: str
    content: str


@dataclass(frozen=True)
class BoilerplateBundle:
    """All files of a scaffolded project.

    Attributes:
        manifest: Build-tool project descriptor, written first
        files: Remaining source and test files, written in order
    """

    manifest: BoilerplateFile
    files: tuple[BoilerplateFile, ...]


def write_boilerplate(target_dir: Path, bundle: BoilerplateBundle) -> list[Path]:
    """Write bundle under target_dir.

    Args:
        target_dir: Project root to scaffold into (must exist)
        bundle: Files to write

    Returns:
        Paths written, manifest first

    Raises:
        ManifestAlreadyExistsError: If the manifest already exists (nothing written)
        OSError: If any write fails; files written before the failure are kept
    """
    manifest_path = target_dir / bundle.manifest.relative_path
    if manifest_path.exists():
        raise ManifestAlreadyExistsError(manifest_path)

    written: list[Path] = []

    manifest_path.write_text(bundle.manifest.content, encoding="utf-8")
    written.append(manifest_path)

    for boilerplate_file in bundle.files:
        file_path = target_dir / boilerplate_file.relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(boilerplate_file.content, encoding="utf-8")
        written.append(file_path)

    logger.debug("Wrote %d boilerplate files to %s", len(written), target_dir)
    return written
