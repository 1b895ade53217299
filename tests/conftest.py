import pytest

KEYWORDS = ("error", "warning", "failed", "success")


@pytest.fixture
def write_logs(tmp_path):
    """Write {name: [lines]} into tmp_path and return the paths in the given order."""
    def _write(files, directory=None):
        root = directory or tmp_path
        root.mkdir(parents=True, exist_ok=True)
        paths = []
        for name, lines in files.items():
            p = root / name
            p.write_text("".join(line + "\n" for line in lines))
            paths.append(str(p))
        return paths
    return _write


@pytest.fixture
def scenario_files(write_logs):
    return write_logs({
        "a.log": ["an error occurred", "warning: low disk", "ERROR again"],
        "b.txt": ["all good", "failed to connect"],
    })
