"""Demo-content backfill for files that were empty when moved."""

import logging
import random
import shutil
from pathlib import Path
from typing import Optional

from ..domain.result import try_catch
from ..models.category import FileTypePolicy
from .asset_picker import AssetPicker
from .operation_log import Mechanism, OperationKind, OperationLog, OperationRecord

logger = logging.getLogger(__name__)


TEXT_TEMPLATES = (
    "Meeting Notes - Q4 Planning\n\nDate: 2024-11-15\nAttendees: Alice, Bob, Charlie\n\n"
    "Agenda:\n1. Budget review for next quarter\n2. New product roadmap discussion\n"
    "3. Team restructuring proposals\n\nKey Decisions:\n"
    "- Approved 15% budget increase for R&D\n- Launch date set for March 2025\n"
    "- Two new hires approved for engineering team\n",

    "Project Status Report\n\nProject: Smart File Organizer v2.0\nStatus: On Track\n"
    "Sprint: 14 of 20\n\nCompleted This Week:\n- Implemented file categorization algorithm\n"
    "- Added support for 15+ file extensions\n- Integrated with cloud storage API\n"
    "- Fixed 3 critical bugs from QA testing\n",

    "Dear Team,\n\nI hope this message finds you well. I wanted to share some exciting "
    "updates about our upcoming product launch.\n\nAfter months of hard work, we are pleased "
    "to announce that the Smart File Organizer will be released on March 15, 2025.\n\n"
    "Key Features:\n- Automatic file categorization by type\n- Smart duplicate detection\n"
    "- Cloud backup integration\n- Cross-platform compatibility\n\n"
    "Best regards,\nThe Development Team\n",

    "Recipe: Classic Chocolate Chip Cookies\n\nPrep Time: 15 minutes\nCook Time: 12 minutes\n"
    "Servings: 48 cookies\n\nIngredients:\n- 2 1/4 cups all-purpose flour\n- 1 tsp baking soda\n"
    "- 1 tsp salt\n- 1 cup butter, softened\n- 2 large eggs\n- 2 cups chocolate chips\n\n"
    "Instructions:\n1. Preheat oven to 375 degrees F\n2. Mix flour, baking soda and salt\n"
    "3. Beat butter, sugars, eggs and vanilla\n4. Stir in chocolate chips\n"
    "5. Bake for 9 to 11 minutes\n",

    "Daily Journal Entry\n\nDate: Wednesday, November 20, 2024\n"
    "Weather: Partly cloudy, 18 degrees C\nMood: Productive and optimistic\n\n"
    "Today was a remarkably productive day. I managed to complete the file organization "
    "module that I have been working on for the past week.\n\nTomorrow, I plan to start "
    "working on the user interface improvements and write some unit tests for the sorting "
    "algorithm.\n\nGratitude list:\n- Supportive team members\n- Good health\n"
    "- Beautiful weather for running\n",
)


class ContentFiller:
    """Write placeholder content into empty files after they are moved.

    Only successful fills are logged. Skips (file missing or non-empty, no
    extension, no assets root, no rule for the extension) and failed copies
    or writes leave the log untouched.
    """

    def __init__(
        self,
        log: OperationLog,
        assets_root: Optional[Path] = None,
        rng: Optional[random.Random] = None,
        picker: Optional[AssetPicker] = None,
    ):
        self.log = log
        self.assets_root = Path(assets_root) if assets_root is not None else None
        self.rng = rng if rng is not None else random.Random()
        self.picker = picker if picker is not None else AssetPicker(self.rng)

    def fill(self, file_path: Path, extension: Optional[str]) -> Optional[OperationRecord]:
        """Backfill ``file_path`` if eligible; return the logged record."""
        if self.assets_root is None or not extension:
            return None

        try:
            if file_path.stat().st_size > 0:
                return None
        except OSError:
            return None

        rule = FileTypePolicy.fill_rule_for(extension)
        if rule is None:
            return None

        asset_dir = self.assets_root / rule.category.asset_dir
        source = self.picker.pick(asset_dir, rule.asset_extensions)
        if source is not None:
            self.log.ensure_capacity()
            copied = try_catch(lambda: shutil.copyfile(source, file_path), OSError)
            if copied.is_success():
                logger.debug(f"Filled {file_path} from {source}")
                return self.log.record(
                    OperationKind.COPY, rule.description, Mechanism.COPY,
                    source, file_path,
                )
            logger.warning(f"Could not copy demo asset {source} to {file_path}: {copied.error()}")
            return None

        if not rule.text_fallback:
            return None

        self.log.ensure_capacity()
        template = TEXT_TEMPLATES[self.rng.randrange(len(TEXT_TEMPLATES))]
        written = try_catch(lambda: file_path.write_text(template, encoding='utf-8'), OSError)
        if written.is_failure():
            logger.warning(f"Could not write demo text to {file_path}: {written.error()}")
            return None

        logger.debug(f"Filled {file_path} from a built-in template")
        return self.log.record(OperationKind.WRITE, rule.description, Mechanism.WRITE, file_path)
