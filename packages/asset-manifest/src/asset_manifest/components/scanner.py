import logging
import os
import posixpath
from typing import Collection, List, Literal

from .label import format_label, node_id
from .node import AssetNode, Folder, Image

logger = logging.getLogger(__name__)

PathStyle = Literal["relative", "web"]

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".svg", ".gif")


def is_image(name: str) -> bool:
    return name.lower().endswith(IMAGE_EXTENSIONS)


def display_name(name: str) -> str:
    """Decode a raw entry name as UTF-8, replacing undecodable bytes with U+FFFD."""
    return os.fsencode(name).decode("utf-8", "replace")


def format_value(relative_path: str, path_style: PathStyle) -> str:
    """Render a logical path as an image value for the front-end."""
    if path_style == "web":
        return "/" + relative_path.lstrip("/")
    return relative_path


def scan_directory(
    dir_path: str | os.PathLike,
    relative_path: str,
    *,
    ignore_files: Collection[str] = (),
    path_style: PathStyle = "relative",
) -> List[AssetNode]:
    """
    Recursively scan an asset directory into folder and image nodes.

    Entries keep the order the filesystem lists them in. Ignored names are
    matched exactly; files that are not images are dropped, and every
    subdirectory becomes a folder node even when it ends up empty.

    Args:
        dir_path: Directory to read.
        relative_path: Logical path of *dir_path*, used to build image values.
        ignore_files: Entry names to skip.
        path_style: "relative" for "faces/a.png", "web" for "/faces/a.png".

    Returns:
        The nodes for the direct entries of *dir_path*.

    Raises:
        OSError: If *dir_path* or any subdirectory cannot be read.
    """
    items: List[AssetNode] = []

    with os.scandir(dir_path) as entries:
        for entry in entries:
            name = display_name(entry.name)
            if name in ignore_files:
                continue

            item_relative_path = posixpath.join(relative_path, name)
            item_id = node_id(name)
            label = format_label(item_id)

            if entry.is_dir(follow_symlinks=False):
                children = scan_directory(
                    entry.path,
                    item_relative_path,
                    ignore_files=ignore_files,
                    path_style=path_style,
                )
                items.append(Folder(id=item_id, label=label, children=children))
            elif entry.is_file(follow_symlinks=False) and is_image(name):
                items.append(
                    Image(
                        id=item_id,
                        label=label,
                        value=format_value(item_relative_path, path_style),
                    )
                )
            else:
                logger.debug("Skipping %s", entry.path)

    return items
