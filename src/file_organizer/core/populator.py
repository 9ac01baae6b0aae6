"""Create a directory inside the workspace and fill it with files."""

import logging
import random
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ..domain.result import try_catch
from ..exceptions import OperationLogOverflowError
from ..models.category import Category
from ..models.config import OrganizerConfig
from ..utils.security import resolve_in_workspace
from .asset_picker import AssetPicker
from .operation_log import Mechanism, OperationKind, OperationLog, describe_error

logger = logging.getLogger(__name__)


# One asset is drawn from each source when populating from the asset pool.
ASSET_SOURCES: Tuple[Tuple[Category, Tuple[str, ...]], ...] = (
    (Category.AUDIO, ('.mp3',)),
    (Category.VIDEOS, ('.mp4',)),
    (Category.IMAGES, ('.png', '.jpg', '.jpeg')),
    (Category.DOCUMENTS, ('.txt',)),
    (Category.DOCUMENTS, ('.pdf',)),
)


@dataclass
class PopulateOutcome:
    """Result of a populate run."""
    dir_path: Path
    log: OperationLog
    created: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DirectoryPopulator:
    """Create a named directory in the workspace and files inside it."""

    def __init__(
        self,
        workspace: Path,
        config: Optional[OrganizerConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.workspace = Path(workspace)
        self.config = config or OrganizerConfig()
        self.log = OperationLog(self.config.max_operations)
        self.picker = AssetPicker(rng)

    def create(self, dir_name: str, filenames: Iterable[str]) -> PopulateOutcome:
        """Create ``dir_name`` and an empty file for each name.

        An existing directory is reused. Failing to create a file is logged
        and the remaining files are still attempted.
        """
        dir_path = resolve_in_workspace(self.workspace, dir_name)
        filenames = list(filenames)

        try:
            error = self._make_directory(dir_path)
            if error is None:
                self._write_files(dir_path, filenames)
        except OperationLogOverflowError as e:
            logger.error(str(e))
            error = str(e)
        if error is not None:
            return PopulateOutcome(dir_path=dir_path, log=self.log, error=error)

        logger.info(f"Created {dir_path} with {len(filenames)} files")
        return PopulateOutcome(dir_path=dir_path, log=self.log, created=len(filenames))

    def _write_files(self, dir_path: Path, filenames: List[str]) -> None:
        for filename in filenames:
            file_path = dir_path / filename
            self.log.ensure_capacity()
            written = try_catch(lambda: file_path.write_bytes(b""), OSError)
            if written.is_failure():
                logger.warning(f"Failed to create {file_path}: {written.error()}")
                self.log.record(
                    OperationKind.WRITE, "Create file", Mechanism.WRITE,
                    file_path, error=written.error(),
                )
            else:
                self.log.record(OperationKind.WRITE, "Create file", Mechanism.WRITE, file_path)

    def populate_from_assets(self, dir_name: str) -> PopulateOutcome:
        """Create ``dir_name`` and copy one random asset per source into it."""
        dir_path = resolve_in_workspace(self.workspace, dir_name)

        picks = self._pick_assets()
        if not picks:
            return PopulateOutcome(
                dir_path=dir_path,
                log=self.log,
                error="No assets found in audio, video, image, txt, or pdf folders",
            )

        try:
            error = self._make_directory(dir_path)
            if error is None:
                self._copy_assets(dir_path, picks)
        except OperationLogOverflowError as e:
            logger.error(str(e))
            error = str(e)
        if error is not None:
            return PopulateOutcome(dir_path=dir_path, log=self.log, error=error)

        return PopulateOutcome(dir_path=dir_path, log=self.log, created=len(picks))

    def _copy_assets(self, dir_path: Path, picks: List[Path]) -> None:
        for source in picks:
            target = dir_path / source.name
            self.log.ensure_capacity()
            copied = try_catch(lambda: shutil.copyfile(source, target), OSError)
            if copied.is_failure():
                logger.warning(f"Failed to copy {source}: {copied.error()}")
            self.log.record(
                OperationKind.COPY, "Populate from assets", Mechanism.COPY,
                source, target, error=copied.error() if copied.is_failure() else None,
            )

    def _pick_assets(self) -> List[Path]:
        assets_root = self.config.assets_root
        if assets_root is None:
            return []

        picks = []
        for category, extensions in ASSET_SOURCES:
            source = self.picker.pick(assets_root / category.asset_dir, extensions)
            if source is not None:
                picks.append(source)
        return picks

    def _make_directory(self, dir_path: Path) -> Optional[str]:
        """Create the target directory; return the error text if fatal."""
        self.log.ensure_capacity()
        created = try_catch(dir_path.mkdir, OSError)
        if created.is_success():
            self.log.record(OperationKind.CREATE_DIR, "Create directory", Mechanism.CREATE_DIR, dir_path)
            return None

        if isinstance(created.error(), FileExistsError) and dir_path.is_dir():
            self.log.record(
                OperationKind.CREATE_DIR, "Create directory (already exists)",
                Mechanism.CREATE_DIR, dir_path,
            )
            return None

        logger.error(f"Cannot create {dir_path}: {created.error()}")
        self.log.record(
            OperationKind.CREATE_DIR, "Create directory", Mechanism.CREATE_DIR,
            dir_path, error=created.error(),
        )
        return describe_error(created.error())
