"""Workspace inspection."""

from pathlib import Path
from typing import Dict, List, Union


def list_workspace(workspace: Path) -> Dict[str, Union[str, List[str]]]:
    """List the immediate subdirectories of the workspace, creating it if absent."""
    workspace.mkdir(parents=True, exist_ok=True)
    directories = sorted(entry.name for entry in workspace.iterdir() if entry.is_dir())
    return {'workspace': str(workspace), 'directories': directories}
