# errors.py
# Failure reasons attached to scan results. These are carried as values,
# a single file's failure never aborts a run.


class ScanError(Exception):
    kind = "ScanError"

    def __init__(self, path, message):
        # args must mirror __init__ so results pickle across process/MPI workers
        super().__init__(str(path), message)
        self.path = str(path)
        self.message = message

    def __str__(self):
        return f"{self.path}: {self.message}"


class FileUnreadable(ScanError):
    kind = "FileUnreadable"


class WorkerTaskFailed(ScanError):
    kind = "WorkerTaskFailed"


class PoolShutdownTimeout(ScanError):
    kind = "PoolShutdownTimeout"
