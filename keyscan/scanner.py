# scanner.py
# Streams one file line by line and counts keyword hits per line.

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional

from keyscan.errors import FileUnreadable, PoolShutdownTimeout, ScanError
from keyscan.keywords import matches, zero_counts

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    path: str
    counts: Dict[str, int] = field(default_factory=dict)
    lines: int = 0
    error: Optional[ScanError] = None

    @property
    def ok(self):
        return self.error is None


def empty_result(path, keywords, error=None):
    return ScanResult(path=str(path), counts=zero_counts(keywords), lines=0, error=error)


def scan(path, keywords, stop=None):
    """Count keyword hits in one file.

    Each line adds at most one to each keyword. An I/O failure ends the scan
    early: the result keeps what was counted so far and carries a
    FileUnreadable error. If ``stop`` is set mid-scan the scan returns
    early with a PoolShutdownTimeout error.
    """
    path = str(path)
    result = empty_result(path, keywords)
    counts = result.counts
    try:
        with open(path, "r", errors="ignore") as fh:
            for line in fh:
                if stop is not None and stop.is_set():
                    result.error = PoolShutdownTimeout(path, f"stopped after {result.lines} lines")
                    logger.warning("Scan of %s stopped after %d lines", path, result.lines)
                    return result
                result.lines += 1
                for kw in matches(line, keywords):
                    counts[kw] += 1
    except OSError as e:
        result.error = FileUnreadable(path, str(e))
        logger.warning("Error reading file %s after %d lines: %s", path, result.lines, e)
        return result

    logger.info("%s processed %s | lines: %d", threading.current_thread().name, path, result.lines)
    return result
