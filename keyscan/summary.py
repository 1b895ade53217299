# summary.py
# Writes the human-readable keyword summary file.

import os


def format_summary(report):
    lines = ["=== Log Keyword Summary ==="]
    for k in report.keywords:
        lines.append(f"{k} = {report.parallel_total.get(k, 0)}")
    lines.append(f"most frequent = {report.most_frequent}")
    lines.append(f"parallel time = {report.parallel_elapsed:.4f}s")
    if report.sequential_elapsed is not None:
        lines.append(f"sequential time = {report.sequential_elapsed:.4f}s")
    return "\n".join(lines) + "\n"


def write_summary(path, report):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w") as fh:
        fh.write(format_summary(report))
    return path
