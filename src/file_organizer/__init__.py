"""File Organizer

Sorts the files of a directory into category folders by extension and
reports every filesystem action as an ordered operation log.
"""

__version__ = "0.1.0"

from .core.operation_log import (
    OperationKind,
    OperationRecord,
    OperationLog
)

from .core.organizer import (
    DirectoryOrganizer,
    OrganizeOutcome
)

from .core.populator import (
    DirectoryPopulator,
    PopulateOutcome
)

from .core.reporter import Reporter
from .core.classifier import classify
from .models.category import Category
from .models.config import OrganizerConfig

__all__ = [
    # Core components
    "DirectoryOrganizer",
    "DirectoryPopulator",
    "Reporter",
    "classify",

    # Types and enums
    "Category",
    "OperationKind",
    "OperationRecord",
    "OperationLog",
    "OrganizeOutcome",
    "PopulateOutcome",
    "OrganizerConfig",
]
