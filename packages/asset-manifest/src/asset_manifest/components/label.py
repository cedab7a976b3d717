import re

_SEPARATORS = re.compile(r"[-_]")


def format_label(name: str) -> str:
    """Turn an asset name into a display label: "my_folder" -> "My Folder"."""
    return " ".join(word[:1].upper() + word[1:] for word in _SEPARATORS.split(name))


def node_id(name: str) -> str:
    """Return *name* up to its first dot, so "foo.bar.png" becomes "foo"."""
    return name.split(".", 1)[0]
