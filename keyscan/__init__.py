# keyscan: count fixed keywords across many log files, in parallel and sequentially.

from keyscan.aggregate import TotalCount, most_frequent
from keyscan.errors import FileUnreadable, PoolShutdownTimeout, ScanError, WorkerTaskFailed
from keyscan.keywords import DEFAULT_KEYWORDS, matches, normalize_keywords
from keyscan.pool import WorkerPool
from keyscan.runner import ComparativeRunner, RunReport
from keyscan.scanner import ScanResult, scan

__version__ = "0.1.0"

__all__ = [
    "ComparativeRunner",
    "DEFAULT_KEYWORDS",
    "FileUnreadable",
    "PoolShutdownTimeout",
    "RunReport",
    "ScanError",
    "ScanResult",
    "TotalCount",
    "WorkerPool",
    "WorkerTaskFailed",
    "matches",
    "most_frequent",
    "normalize_keywords",
    "scan",
]
