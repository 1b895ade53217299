# runner.py
# Scans the same files twice, through the worker pool and then sequentially,
# and times both branches.

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from keyscan.aggregate import TotalCount, most_frequent
from keyscan.errors import ScanError, WorkerTaskFailed
from keyscan.keywords import normalize_keywords
from keyscan.pool import FileTask, WorkerPool
from keyscan.scanner import ScanResult, empty_result, scan

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    keywords: tuple
    parallel_total: Dict[str, int]
    parallel_elapsed: float
    sequential_total: Optional[Dict[str, int]] = None
    sequential_elapsed: Optional[float] = None
    pool_size: int = 0
    files: List[ScanResult] = field(default_factory=list)
    failures: List[ScanError] = field(default_factory=list)

    @property
    def most_frequent(self):
        return most_frequent(self.parallel_total, self.keywords)

    @property
    def totals_match(self):
        if self.sequential_total is None:
            return None
        return self.parallel_total == self.sequential_total

    @property
    def speedup(self):
        if not self.sequential_elapsed or not self.parallel_elapsed:
            return None
        return self.sequential_elapsed / self.parallel_elapsed

    @property
    def efficiency(self):
        speedup = self.speedup
        if speedup is None or self.pool_size < 1:
            return None
        return speedup / float(self.pool_size)


class ComparativeRunner:
    def __init__(self, keywords, pool=None, sequential=True, scan_fn=scan):
        self.keywords = normalize_keywords(keywords)
        self.pool = pool if pool is not None else WorkerPool(scan_fn=scan_fn)
        self.sequential = sequential
        self.scan_fn = scan_fn

    def run(self, files):
        files = [str(f) for f in files]
        logger.info("Scanning %d file(s) for %s", len(files), ", ".join(self.keywords))

        results, par_total, par_elapsed = self.run_parallel(files)
        failures = [r.error for r in results if r.error is not None]
        report = RunReport(
            keywords=self.keywords,
            parallel_total=par_total.as_dict(),
            parallel_elapsed=par_elapsed,
            pool_size=self.pool.last_pool_size,
            files=results,
        )

        if self.sequential:
            seq_results, seq_total, seq_elapsed = self.run_sequential(files)
            failures.extend(r.error for r in seq_results if r.error is not None)
            report.sequential_total = seq_total.as_dict()
            report.sequential_elapsed = seq_elapsed
            if not report.totals_match:
                logger.warning("Parallel and sequential totals differ: %s vs %s",
                               report.parallel_total, report.sequential_total)

        report.failures = failures
        return report

    def run_parallel(self, files):
        tasks = [FileTask(path, self.keywords) for path in files]
        total = TotalCount(self.keywords)
        t0 = time.perf_counter()
        results = self.pool.run_all(tasks)
        total.merge_all(results)
        elapsed = time.perf_counter() - t0
        return results, total, elapsed

    def run_sequential(self, files):
        total = TotalCount(self.keywords)
        results = []
        t0 = time.perf_counter()
        for path in files:
            try:
                r = self.scan_fn(path, self.keywords)
            except Exception as e:
                logger.warning("Sequential scan failed on %s: %r", path, e)
                r = empty_result(path, self.keywords, WorkerTaskFailed(path, repr(e)))
            total.merge(r.counts)
            results.append(r)
        elapsed = time.perf_counter() - t0
        return results, total, elapsed
