"""Random selection of demo assets from the asset pool."""

import logging
import os
import random
from pathlib import Path
from typing import Iterable, List, Optional

from ..domain.result import try_catch

logger = logging.getLogger(__name__)


class AssetPicker:
    """Pick one asset uniformly at random among matching files."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def candidates(self, directory: Path, allowed_extensions: Iterable[str]) -> List[Path]:
        """Matching entries in enumeration order, or [] if unreadable.

        Dot-files are skipped and extensions compare case-insensitively.
        """
        allowed = {ext.lower() for ext in allowed_extensions}
        listed = try_catch(lambda: os.listdir(directory), OSError)
        if listed.is_failure():
            logger.debug(f"Asset directory {directory} unavailable: {listed.error()}")
            return []
        names = listed.value()

        return [
            Path(directory) / name
            for name in names
            if not name.startswith('.') and os.path.splitext(name)[1].lower() in allowed
        ]

    def pick(self, directory: Path, allowed_extensions: Iterable[str]) -> Optional[Path]:
        """Return a random matching asset, or None when there is none."""
        matches = self.candidates(directory, allowed_extensions)
        if not matches:
            return None
        return matches[self.rng.randrange(len(matches))]
