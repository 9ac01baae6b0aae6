"""Extension-based file classification."""

from typing import Optional

from ..models.category import Category, FileTypePolicy


def get_extension(filename: str) -> Optional[str]:
    """Return the text from the last ``.`` to the end, or None without one.

    Unlike ``Path.suffix`` a leading dot counts, so ``.bashrc`` yields
    ``.bashrc``.
    """
    index = filename.rfind('.')
    if index < 0:
        return None
    return filename[index:]


def classify(filename: str) -> Category:
    """Map a filename to its category by exact, case-sensitive extension."""
    return FileTypePolicy.category_for(get_extension(filename))
