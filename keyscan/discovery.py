# discovery.py
# Builds the list of files to scan: a directory listing, a manifest file,
# or a filename pattern.

import os

DEFAULT_EXTENSIONS = (".txt", ".log")


def discover_files(directory, extensions=DEFAULT_EXTENSIONS):
    """Regular files in directory whose suffix is in extensions, sorted by name."""
    if not os.path.isdir(directory):
        raise NotADirectoryError(f"not a directory: {directory}")
    exts = tuple(e.lower() for e in extensions)
    files = []
    for name in sorted(os.listdir(directory)):
        path = os.path.join(directory, name)
        if os.path.isfile(path) and name.lower().endswith(exts):
            files.append(path)
    return files


def read_manifest(path):
    """Read manifest text file (one filename per line)."""
    files = []
    with open(path, "r", errors="ignore") as fh:
        for line in fh:
            s = line.strip()
            if s:
                files.append(s)
    return files


def build_from_pattern(pattern, count):
    """Construct filenames by substituting {n} with 1..count (no filesystem probing)."""
    if "{n}" not in pattern:
        raise ValueError("pattern must contain '{n}'")
    if count <= 0:
        raise ValueError("pattern mode requires a positive count")
    return [pattern.replace("{n}", str(i)) for i in range(1, count + 1)]
