# pool.py
# Runs one scan task per file on a bounded pool of workers.
#
# Backends:
#   thread  - concurrent.futures.ThreadPoolExecutor (default)
#   process - concurrent.futures.ProcessPoolExecutor
#   mpi     - mpi4py.futures.MPIPoolExecutor, workers are MPI processes
#             (run under `mpiexec -n 1 python -m mpi4py.futures ...` or with
#             dynamic process spawning available)

import logging
import os
import threading
from collections import namedtuple
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, wait

from keyscan.errors import PoolShutdownTimeout, WorkerTaskFailed
from keyscan.scanner import empty_result, scan

logger = logging.getLogger(__name__)

BACKENDS = ("thread", "process", "mpi")
DEFAULT_SHUTDOWN_TIMEOUT = 60.0

FileTask = namedtuple("FileTask", ["path", "keywords"])


def make_executor(backend, workers):
    if backend == "thread":
        return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="keyscan-worker")
    if backend == "process":
        return ProcessPoolExecutor(max_workers=workers)
    if backend == "mpi":
        from mpi4py.futures import MPIPoolExecutor
        return MPIPoolExecutor(max_workers=workers)
    raise ValueError(f"unknown backend {backend!r}, expected one of {', '.join(BACKENDS)}")


def terminate_workers(executor):
    """Kill the worker processes of a ProcessPoolExecutor and return them."""
    procs = list((getattr(executor, "_processes", None) or {}).values())
    if hasattr(executor, "terminate_workers"):
        executor.terminate_workers()
    else:
        for proc in procs:
            proc.terminate()
    logger.warning("Terminated %d worker process(es)", len(procs))
    return procs


class WorkerPool:
    """Bounded pool that scans files concurrently and tolerates per-task failures.

    ``scan_fn(path, keywords[, stop])`` produces a ScanResult. When the
    shutdown bound expires, pending tasks are cancelled and unfinished ones
    are reported as PoolShutdownTimeout results. What happens to a task that
    is still running depends on the backend:

    - process: the worker processes are terminated.
    - thread: threads cannot be killed. ``scan_fn`` receives a
      threading.Event that is set at the bound and ``scan`` checks it
      between lines, but a thread blocked inside a call (e.g. opening a
      FIFO with no writer) keeps running and the interpreter waits for
      it at exit.
    - mpi: pending tasks are cancelled only, running ones finish.
    """

    def __init__(self, max_workers=None, backend="thread",
                 shutdown_timeout=DEFAULT_SHUTDOWN_TIMEOUT, scan_fn=scan):
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        if backend not in BACKENDS:
            raise ValueError(f"unknown backend {backend!r}, expected one of {', '.join(BACKENDS)}")
        if shutdown_timeout is not None and shutdown_timeout < 0:
            raise ValueError("shutdown_timeout must be non-negative")
        self.max_workers = max_workers
        self.backend = backend
        self.shutdown_timeout = shutdown_timeout
        self.scan_fn = scan_fn
        self.last_pool_size = 0
        self.last_terminated = []

    def pool_size(self, num_tasks):
        available = self.max_workers or os.cpu_count() or 1
        return min(available, num_tasks)

    def run_all(self, tasks):
        """Scan every task and return one ScanResult per task, in task order."""
        tasks = list(tasks)
        size = self.pool_size(len(tasks))
        self.last_pool_size = size
        self.last_terminated = []
        if size == 0:
            return []

        logger.info("Dispatching %d file(s) to %d %s worker(s)", len(tasks), size, self.backend)
        stop = threading.Event() if self.backend == "thread" else None
        executor = make_executor(self.backend, size)
        futures = {}
        timed_out = False
        try:
            for i, task in enumerate(tasks):
                if stop is not None:
                    fut = executor.submit(self.scan_fn, task.path, task.keywords, stop)
                else:
                    fut = executor.submit(self.scan_fn, task.path, task.keywords)
                futures[fut] = i

            done, not_done = wait(futures, timeout=self.shutdown_timeout)
            results = [None] * len(tasks)
            for fut in done:
                i = futures[fut]
                results[i] = self._collect(fut, tasks[i])

            if not_done:
                timed_out = True
                if stop is not None:
                    stop.set()
                logger.warning("Pool did not finish within %ss, stopping %d unfinished task(s)",
                               self.shutdown_timeout, len(not_done))
                for fut in not_done:
                    fut.cancel()
                    task = tasks[futures[fut]]
                    err = PoolShutdownTimeout(
                        task.path, f"not finished within {self.shutdown_timeout}s")
                    results[futures[fut]] = empty_result(task.path, task.keywords, err)
                if self.backend == "process":
                    self.last_terminated = terminate_workers(executor)
        finally:
            executor.shutdown(wait=not timed_out, cancel_futures=timed_out)
        return results

    def _collect(self, fut, task):
        try:
            return fut.result()
        except Exception as e:
            logger.warning("Worker failed on %s: %r", task.path, e)
            return empty_result(task.path, task.keywords, WorkerTaskFailed(task.path, repr(e)))
