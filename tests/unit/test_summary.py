from keyscan.runner import RunReport
from keyscan.summary import format_summary, write_summary

KEYWORDS = ("error", "warning", "failed", "success")


def make_report(**overrides):
    fields = dict(
        keywords=KEYWORDS,
        parallel_total={"error": 2, "warning": 1, "failed": 1, "success": 0},
        parallel_elapsed=0.0123,
        sequential_total={"error": 2, "warning": 1, "failed": 1, "success": 0},
        sequential_elapsed=0.015,
        pool_size=2,
    )
    fields.update(overrides)
    return RunReport(**fields)


def test_format_summary_lists_keywords_in_order():
    text = format_summary(make_report())
    assert text.splitlines() == [
        "=== Log Keyword Summary ===",
        "error = 2",
        "warning = 1",
        "failed = 1",
        "success = 0",
        "most frequent = error",
        "parallel time = 0.0123s",
        "sequential time = 0.0150s",
    ]


def test_format_summary_without_sequential_or_matches():
    report = make_report(parallel_total={k: 0 for k in KEYWORDS},
                         sequential_total=None, sequential_elapsed=None)
    text = format_summary(report)
    assert "most frequent = None" in text
    assert "sequential time" not in text


def test_write_summary_creates_parent_directories(tmp_path):
    out = tmp_path / "output" / "nested" / "log_result.txt"
    write_summary(str(out), make_report())
    assert out.read_text().startswith("=== Log Keyword Summary ===\nerror = 2\n")
