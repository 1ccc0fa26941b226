import logging
import shutil
from pathlib import Path

from staticpages.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def remove_tree(path: str | Path) -> None:
    path = Path(path)
    if not path.exists() and not path.is_symlink():
        return

    if not path.is_dir() or path.is_symlink():
        raise ConfigurationError(f"Destination '{path}' exists and is not a directory.")

    # Files left over from previous builds would be preserved otherwise.
    shutil.rmtree(path)
    logger.debug("Removed %s", path)


def ensure_directories_and_write_file(file_path: str | Path, contents: str) -> None:
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as file:
        file.write(contents)


def copy_directory(src: str | Path, dst: str | Path) -> None:
    """
    Copies the contents of `src` into `dst`, keeping the directory structure and overwriting files that already exist
    at the same relative path.

    :raises ConfigurationError: if `src` is not an existing directory.
    """
    src = Path(src)
    if not src.is_dir():
        raise ConfigurationError(f"Assets directory '{src}' does not exist or is not a directory.")

    shutil.copytree(src, dst, dirs_exist_ok=True)
    logger.debug("Copied %s into %s", src, dst)
