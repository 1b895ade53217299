from keyscan import cli


def run_cli(args, out_path):
    return cli.main(args + ["-o", str(out_path), "--workers", "2"])


def test_directory_run_prints_report_and_writes_summary(tmp_path, scenario_files, capsys):
    out = tmp_path / "output" / "log_result.txt"

    assert run_cli([str(tmp_path)], out) == 0

    printed = capsys.readouterr().out
    assert "Found 2 file(s) to analyse" in printed
    assert "ERROR: 2" in printed
    assert "WARNING: 1" in printed
    assert "FAILED: 1" in printed
    assert "SUCCESS: 0" in printed
    assert "MOST FREQUENT KEYWORD: ERROR" in printed
    assert "Speedup:" in printed
    assert f"{scenario_files[0]} | lines: 3" in printed
    assert f"{scenario_files[1]} | lines: 2" in printed
    assert "error = 2" in out.read_text()


def test_invalid_directory_exits_with_error(tmp_path, capsys):
    assert run_cli([str(tmp_path / "missing")], tmp_path / "out.txt") == 1
    assert "Invalid folder path" in capsys.readouterr().err


def test_empty_directory_is_not_an_error(tmp_path, capsys):
    empty = tmp_path / "empty"
    empty.mkdir()
    assert run_cli([str(empty)], tmp_path / "out.txt") == 0
    assert "No log files found" in capsys.readouterr().out
    assert not (tmp_path / "out.txt").exists()


def test_manifest_mode_reports_missing_files(tmp_path, scenario_files, capsys):
    manifest = tmp_path / "manifest.lst"
    manifest.write_text("\n".join(scenario_files + [str(tmp_path / "gone.log")]) + "\n")

    assert run_cli(["--manifest", str(manifest), "--no-seq"], tmp_path / "out.txt") == 0

    printed = capsys.readouterr().out
    assert "ERROR: 2" in printed
    assert "FILES WITH ERRORS: 1" in printed
    assert "[FileUnreadable]" in printed
    assert f"{tmp_path / 'gone.log'} | lines: 0 [FileUnreadable]" in printed
    assert "Sequential time: N/A" in printed


def test_pattern_mode_requires_count(tmp_path, capsys):
    assert run_cli(["--pattern", str(tmp_path / "node{n}.log")], tmp_path / "out.txt") == 1
    assert "Invalid pattern" in capsys.readouterr().err


def test_pattern_mode(tmp_path, write_logs, capsys):
    write_logs({"node1.log": ["error"], "node2.log": ["success", "error"]})
    args = ["--pattern", str(tmp_path / "node{n}.log"), "--count", "2"]
    assert run_cli(args, tmp_path / "out.txt") == 0
    assert "ERROR: 2" in capsys.readouterr().out


def test_directory_and_manifest_together_rejected(tmp_path, capsys):
    assert run_cli([str(tmp_path), "--manifest", "m.txt"], tmp_path / "out.txt") == 1
    assert "not both" in capsys.readouterr().err


def test_custom_keywords(tmp_path, scenario_files, capsys):
    assert run_cli([str(tmp_path), "-k", "Disk", "connect"], tmp_path / "out.txt") == 0
    printed = capsys.readouterr().out
    assert "DISK: 1" in printed
    assert "CONNECT: 1" in printed
    assert "MOST FREQUENT KEYWORD: DISK" in printed


def test_invalid_workers_rejected(tmp_path, capsys):
    assert cli.main([str(tmp_path), "--workers", "0", "-o", str(tmp_path / "o.txt")]) == 1
    assert "Invalid arguments" in capsys.readouterr().err


def test_prompts_for_directory_when_no_input(tmp_path, scenario_files, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: str(tmp_path))
    assert cli.main(["-o", str(tmp_path / "out" / "r.txt")]) == 0
    assert "ERROR: 2" in capsys.readouterr().out


def test_unwritable_summary_path(tmp_path, scenario_files, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory\n")
    assert run_cli([str(tmp_path)], blocker / "log_result.txt") == 1
    assert "Error writing output file" in capsys.readouterr().err


def test_empty_manifest_names_the_manifest(tmp_path, capsys):
    manifest = tmp_path / "empty.lst"
    manifest.write_text("\n\n")
    assert run_cli(["--manifest", str(manifest)], tmp_path / "out.txt") == 0
    printed = capsys.readouterr().out
    assert f"Manifest '{manifest}' lists no files" in printed
    assert ".txt / .log" not in printed
