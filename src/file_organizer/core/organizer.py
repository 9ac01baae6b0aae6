"""Main orchestration logic for organize mode.

A run opens the target directory, ensures the five category folders,
enumerates the top-level entries once and moves every non-directory entry
into the folder its extension maps to. Each attempted action lands in the
run's OperationLog; a failed move is recorded and the next entry is
processed.
"""

import logging
import os
import random
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from ..domain.result import try_catch
from ..exceptions import OperationLogOverflowError
from ..models.category import Category
from ..models.config import OrganizerConfig
from .classifier import classify, get_extension
from .content_filler import ContentFiller
from .operation_log import Mechanism, OperationKind, OperationLog, describe_error

logger = logging.getLogger(__name__)


class RunState(Enum):
    """Lifecycle of a single organize run."""
    INIT = "init"
    DIRECTORY_OPENED = "directory_opened"
    CATEGORIES_ENSURED = "categories_ensured"
    SCANNING = "scanning"
    REPORTING = "reporting"
    DONE = "done"
    FAILED = "failed"


@dataclass
class OrganizeOutcome:
    """Everything a run produced, ready for the reporter."""
    base_path: Path
    log: OperationLog
    categories: Dict[Category, List[str]]
    opened: bool = True
    error: Optional[str] = None
    skipped: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


class DirectoryOrganizer:
    """Sort the top-level files of one directory into category folders."""

    def __init__(
        self,
        base_path: Path,
        config: Optional[OrganizerConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.base_path = Path(base_path)
        self.config = config or OrganizerConfig()
        self.log = OperationLog(self.config.max_operations)
        self.filler = ContentFiller(self.log, self.config.assets_root, rng)
        self.categories: Dict[Category, List[str]] = {category: [] for category in Category}
        self.skipped: List[str] = []
        self.state = RunState.INIT

    def category_dir(self, category: Category) -> Path:
        return self.base_path / category.folder_name

    def run(self) -> OrganizeOutcome:
        """Execute the run and return its outcome; never raises on OS errors."""
        if self.state is not RunState.INIT:
            raise RuntimeError(f"Organizer already ran (state: {self.state.value})")

        try:
            entries = os.scandir(self.base_path)
        except OSError as e:
            self.log.record(
                OperationKind.READ_DIRECTORY, "Read directory entries",
                Mechanism.READ_DIRECTORY, self.base_path, error=e,
            )
            self.state = RunState.FAILED
            logger.error(f"Cannot open {self.base_path}: {e}")
            return self._outcome(opened=False, error=describe_error(e))

        self.log.record(
            OperationKind.READ_DIRECTORY, "Read directory entries",
            Mechanism.READ_DIRECTORY, self.base_path,
        )
        self.state = RunState.DIRECTORY_OPENED

        try:
            with entries:
                self._ensure_categories()
                self.state = RunState.CATEGORIES_ENSURED

                self.state = RunState.SCANNING
                for entry in entries:
                    self._process_entry(entry)
        except OperationLogOverflowError as e:
            self.state = RunState.FAILED
            logger.error(str(e))
            return self._outcome(error=str(e))

        self.state = RunState.REPORTING
        outcome = self._outcome()
        self.state = RunState.DONE

        moved = sum(len(names) for names in self.categories.values())
        logger.info(f"Organized {moved} files in {self.base_path}")
        return outcome

    def _outcome(self, opened: bool = True, error: Optional[str] = None) -> OrganizeOutcome:
        return OrganizeOutcome(
            base_path=self.base_path,
            log=self.log,
            categories={category: list(names) for category, names in self.categories.items()},
            opened=opened,
            error=error,
            skipped=list(self.skipped),
        )

    def _ensure_categories(self) -> None:
        """Create all category folders; an existing folder is not a failure."""
        for category in Category:
            folder = self.category_dir(category)
            self.log.ensure_capacity()
            created = try_catch(folder.mkdir, OSError)

            if created.is_success():
                self.log.record(
                    OperationKind.CREATE_DIR, "Create category folder",
                    Mechanism.CREATE_DIR, folder,
                )
            elif isinstance(created.error(), FileExistsError) and folder.is_dir():
                self.log.record(
                    OperationKind.CREATE_DIR, "Create category folder (already exists)",
                    Mechanism.CREATE_DIR, folder,
                )
            else:
                logger.warning(f"Cannot create {folder}: {created.error()}")
                self.log.record(
                    OperationKind.CREATE_DIR, "Create category folder",
                    Mechanism.CREATE_DIR, folder, error=created.error(),
                )

    def _process_entry(self, entry: os.DirEntry) -> None:
        name = entry.name
        if name in ('.', '..'):
            return

        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False
        if is_dir:
            logger.debug(f"Skipping directory {name}")
            return

        category = classify(name)
        limit = self.config.max_files_per_category
        if limit is not None and len(self.categories[category]) >= limit:
            logger.warning(f"{category.value} is full ({limit} files), leaving {name} in place")
            self.skipped.append(name)
            return

        source = self.base_path / name
        target = self.category_dir(category) / name
        self.log.ensure_capacity()
        moved = try_catch(lambda: os.rename(source, target), OSError)

        if moved.is_failure():
            logger.warning(f"Failed to move {source}: {moved.error()}")
            self.log.record(
                OperationKind.MOVE, "Move file to category", Mechanism.MOVE,
                source, target, error=moved.error(),
            )
            return

        self.log.record(OperationKind.MOVE, "Move file to category", Mechanism.MOVE, source, target)
        logger.debug(f"Moved {name} to {category.value}")
        self.categories[category].append(name)
        self.filler.fill(target, get_extension(name))
