"""
Containing-directory derivation for engine-reported paths.

Works on strings only; paths may come from another platform than the one the
client runs on, so ``os.path`` is not used.
"""


def directory_of(path: str) -> str:
    """Return the part of ``path`` before its last separator.

    Backslash-delimited (Windows) paths take precedence; forward slashes are
    only considered when no backslash is present. A path without any
    separator is returned unchanged.
    """
    if "\\" in path:
        return path[: path.rfind("\\")]
    if "/" in path:
        return path[: path.rfind("/")]
    return path


def has_parent(path: str) -> bool:
    """True when ``directory_of`` can derive a parent for ``path``."""
    return bool(path) and ("\\" in path or "/" in path)


__all__ = ["directory_of", "has_parent"]
