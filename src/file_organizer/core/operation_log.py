"""Ordered, append-only record of every filesystem action in a run.

Records are created at the moment an action is attempted, numbered from 1
in the order they are appended, and never changed or reordered afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from ..exceptions import OperationLogOverflowError


class OperationKind(Enum):
    """Type of filesystem operation, valued by its wire name."""
    READ_DIRECTORY = "readdir"
    CREATE_DIR = "mkdir"
    MOVE = "rename"
    COPY = "copyFile"
    WRITE = "writeFile"


class Mechanism:
    """System calls behind each operation, reported for traceability."""
    READ_DIRECTORY = "opendir(3)/readdir(3)"
    CREATE_DIR = "mkdir(2)"
    MOVE = "rename(2)"
    COPY = "open(2)/read(2)/write(2)/close(2)"
    WRITE = "open(2)/write(2)/close(2)"


PathLike = Union[str, Path, None]


@dataclass(slots=True, frozen=True)
class OperationRecord:
    """Represents a single attempted filesystem action."""
    id: int
    kind: OperationKind
    description: str
    mechanism: str
    path: str
    path2: str = ""
    success: bool = True
    error: str = ""

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "op": self.kind.value,
            "description": self.description,
            "syscall": self.mechanism,
            "path": self.path,
            "path2": self.path2,
            "success": self.success,
            "error": self.error,
        }


def describe_error(error: Optional[BaseException]) -> str:
    """System error text for a failed operation, empty when there is none."""
    if error is None:
        return ""
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)


class OperationLog:
    """Growable operation sequence owned by a single run.

    With ``capacity`` set, appending past it raises
    ``OperationLogOverflowError`` instead of dropping the record. Callers
    check ``ensure_capacity`` before touching the filesystem so that no
    action happens without its record.
    """

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = capacity
        self._records: List[OperationRecord] = []

    @property
    def is_full(self) -> bool:
        return self.capacity is not None and len(self._records) >= self.capacity

    def ensure_capacity(self) -> None:
        """Raise before an action is attempted if its record would not fit."""
        if self.is_full:
            raise OperationLogOverflowError(
                f"Operation log is full ({self.capacity} records)"
            )

    def record(
        self,
        kind: OperationKind,
        description: str,
        mechanism: str,
        path: PathLike,
        path2: PathLike = None,
        error: Optional[BaseException] = None,
    ) -> OperationRecord:
        """Append a record; ``error`` set means the operation failed."""
        self.ensure_capacity()

        rec = OperationRecord(
            id=len(self._records) + 1,
            kind=kind,
            description=description,
            mechanism=mechanism,
            path=str(path) if path is not None else "",
            path2=str(path2) if path2 is not None else "",
            success=error is None,
            error=describe_error(error),
        )
        self._records.append(rec)
        return rec

    @property
    def records(self) -> List[OperationRecord]:
        return list(self._records)

    def by_kind(self, kind: OperationKind) -> List[OperationRecord]:
        return [r for r in self._records if r.kind is kind]

    def to_list(self) -> List[Dict]:
        return [r.to_dict() for r in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[OperationRecord]:
        return iter(list(self._records))
