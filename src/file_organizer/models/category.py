"""Category model and the extension rules that feed it."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class Category(Enum):
    """Fixed classification buckets; the value doubles as the folder name."""
    DOCUMENTS = "Documents"
    IMAGES = "Images"
    AUDIO = "Audio"
    VIDEOS = "Videos"
    OTHERS = "Others"

    @property
    def folder_name(self) -> str:
        return self.value

    @property
    def asset_dir(self) -> Optional[str]:
        """Subdirectory of the asset pool holding demo content, if any."""
        return _ASSET_DIRS.get(self)


_ASSET_DIRS = {
    Category.DOCUMENTS: "documents",
    Category.IMAGES: "images",
    Category.AUDIO: "audio",
    Category.VIDEOS: "videos",
}


@dataclass(frozen=True, slots=True)
class FillRule:
    """How an empty file with a given extension gets demo content."""
    label: str
    category: Category
    asset_extensions: FrozenSet[str]
    text_fallback: bool = False

    @property
    def description(self) -> str:
        return f"Fill {self.label} with demo content"


class FileTypePolicy:
    """Single source of truth for extension handling.

    Two rule sets are kept apart on purpose: classification matches the
    extension exactly (``.JPG`` is not an image), fill eligibility and asset
    matching compare lowercased extensions.
    """

    CLASSIFICATION_RULES: Tuple[Tuple[Category, FrozenSet[str]], ...] = (
        (Category.DOCUMENTS, frozenset({'.txt', '.pdf', '.docx', '.doc', '.xlsx', '.pptx'})),
        (Category.IMAGES, frozenset({'.jpg', '.jpeg', '.png', '.gif', '.bmp', '.svg'})),
        (Category.AUDIO, frozenset({'.mp3', '.wav', '.aac', '.flac', '.ogg'})),
        (Category.VIDEOS, frozenset({'.mp4', '.mkv', '.avi', '.mov', '.wmv'})),
    )

    FILL_RULES: Dict[str, FillRule] = {
        '.txt': FillRule("txt", Category.DOCUMENTS, frozenset({'.txt'}), text_fallback=True),
        '.pdf': FillRule("pdf", Category.DOCUMENTS, frozenset({'.pdf'})),
        '.jpg': FillRule("image", Category.IMAGES, frozenset({'.jpg', '.jpeg', '.png'})),
        '.jpeg': FillRule("image", Category.IMAGES, frozenset({'.jpg', '.jpeg', '.png'})),
        '.png': FillRule("image", Category.IMAGES, frozenset({'.jpg', '.jpeg', '.png'})),
        '.mp3': FillRule("mp3", Category.AUDIO, frozenset({'.mp3'})),
        '.mp4': FillRule("mp4", Category.VIDEOS, frozenset({'.mp4'})),
    }

    @classmethod
    def category_for(cls, extension: Optional[str]) -> Category:
        """Exact, case-sensitive lookup used for classification."""
        if extension:
            for category, extensions in cls.CLASSIFICATION_RULES:
                if extension in extensions:
                    return category
        return Category.OTHERS

    @classmethod
    def fill_rule_for(cls, extension: Optional[str]) -> Optional[FillRule]:
        """Case-insensitive lookup used for demo-content backfill."""
        if not extension:
            return None
        return cls.FILL_RULES.get(extension.lower())
