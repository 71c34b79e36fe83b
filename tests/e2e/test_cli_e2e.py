from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script in a subprocess and checks exit codes,
stream output and written files.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "filetree_markup" / "main.py"


def run_cli(args: List[str], stdin: str = "", home: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.

    HOME points to a temporary directory so no user configuration leaks in.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    if home is not None:
        env["HOME"] = str(home)
        env["LOCALAPPDATA"] = str(home)

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        input=stdin,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_stdin_to_stdout(tmp_path: Path) -> None:
    result = run_cli([], stdin="<ul><li>README.md Project docs</li></ul>", home=tmp_path)

    assert result.returncode == 0, result.stderr
    assert '<li class="file">' in result.stdout
    assert '<span class="comment">Project docs</span>' in result.stdout


def test_file_to_file_with_locale(tmp_path: Path) -> None:
    source = tmp_path / "tree.html"
    source.write_text("<ul>\n<li>src/</li>\n</ul>\n", encoding="utf-8")
    target = tmp_path / "out" / "tree.html"

    result = run_cli(["-i", str(source), "-o", str(target), "--locale", "es"], home=tmp_path)

    assert result.returncode == 0, result.stderr
    output = target.read_text(encoding="utf-8")
    assert '<span class="sr-only">Directorio</span>' in output
    assert "<details open" in output


def test_invalid_tree_exit_code(tmp_path: Path) -> None:
    result = run_cli([], stdin="<p>Intro</p><ul><li>a</li></ul>", home=tmp_path)

    assert result.returncode == 1
    assert "ERROR:" in result.stderr
    assert result.stderr.count("`<p>` - `<ul>`") == 1
    assert result.stdout == ""


def test_missing_input_path(tmp_path: Path) -> None:
    result = run_cli(["-i", str(tmp_path / "absent.html")], home=tmp_path)

    assert result.returncode == 2
    assert "does not exist" in result.stderr


def test_bad_definitions_file(tmp_path: Path) -> None:
    defs = tmp_path / "icons.json"
    defs.write_text("{", encoding="utf-8")

    result = run_cli(["--definitions", str(defs)], stdin="<ul><li>a</li></ul>", home=tmp_path)

    assert result.returncode == 2
    assert "not valid JSON" in result.stderr


def test_custom_definitions_and_config(tmp_path: Path) -> None:
    defs = tmp_path / "icons.json"
    defs.write_text(json.dumps({"files": {"notes": "seti:license"}}), encoding="utf-8")
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"directory_label": "Ordner"}), encoding="utf-8")

    result = run_cli(
        ["--config", str(config), "--definitions", str(defs)],
        stdin="<ul><li>docs<ul><li>notes</li></ul></li></ul>",
        home=tmp_path,
    )

    assert result.returncode == 0, result.stderr
    assert '<span class="sr-only">Ordner</span>' in result.stdout


def test_undecodable_input_exit_code(tmp_path: Path) -> None:
    source = tmp_path / "tree.html"
    source.write_bytes(b"<ul><li>caf\xff</li></ul>")

    result = run_cli(["-i", str(source)], home=tmp_path)

    assert result.returncode == 2
    assert "ERROR: Cannot read input" in result.stderr
    assert "Traceback" not in result.stderr


def test_directory_as_input_exit_code(tmp_path: Path) -> None:
    result = run_cli(["-i", str(tmp_path)], home=tmp_path)

    assert result.returncode == 2
    assert "ERROR: Cannot read input" in result.stderr
    assert "Traceback" not in result.stderr


def test_unwritable_output_exit_code(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    result = run_cli(["-o", str(blocker / "tree.html")], stdin="<ul><li>a</li></ul>", home=tmp_path)

    assert result.returncode == 2
    assert "ERROR: Cannot write output" in result.stderr
    assert "Traceback" not in result.stderr


def test_log_file_records_run(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"

    result = run_cli(["--log-file", str(log_file)], stdin="<ul><li>a/<li>b.md</ul>", home=tmp_path)

    assert result.returncode == 0, result.stderr
    assert "1 file(s), 1 directory(ies)" in log_file.read_text(encoding="utf-8")


def test_log_file_defaults_to_user_data_dir(tmp_path: Path) -> None:
    result = run_cli(["--log-file"], stdin="<ul><li>a.md</li></ul>", home=tmp_path)

    assert result.returncode == 0, result.stderr
    app_dir = "FileTreeMarkup" if os.name == "nt" else ".filetree_markup"
    assert (tmp_path / app_dir / "logs" / "filetree_markup.log").exists()
