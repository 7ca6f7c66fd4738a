"""Path resolution and directory helpers."""

from pathlib import Path
from typing import Optional, Union

from mail_composer.errors import internal

PathLike = Union[str, Path]


def resolve_path(path: PathLike, base_dir: Optional[Path] = None) -> Path:
    """
    Resolve a configured path against the workspace base directory.

    Args:
        path: Configured path (relative, absolute or starting with "~")
        base_dir: Workspace base directory (default: current directory)

    Returns:
        Absolute paths and "~" paths are expanded and returned as-is;
        relative paths are joined onto base_dir

    Examples:
        >>> resolve_path("data/work_times.json", Path("/work"))
        PosixPath('/work/data/work_times.json')
    """
    expanded = Path(path).expanduser()
    if expanded.is_absolute():
        return expanded
    return (base_dir or Path.cwd()) / expanded


def ensure_directory_exists(path: Path) -> None:
    """
    Create a directory (and its parents) unless it already exists.

    Args:
        path: Directory path

    Raises:
        AppError: INTERNAL_SERVER_ERROR if the path is a file or mkdir fails
    """
    if path.exists():
        if not path.is_dir():
            raise internal(
                f"path exists but is not a directory: {path}",
                "Point the setting at a directory, not a file.",
            )
        return

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise internal(
            f"failed to create directory: {path}",
            "Check write permissions on the parent directory.",
            source=e,
        ) from e
