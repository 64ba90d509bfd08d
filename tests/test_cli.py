# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the command-line front end."""
import json
import subprocess
import sys
import unittest
from pathlib import Path

import pytest

from solar_system_dump.cli import main

DATA = Path(__file__).parent / "data" / "kerbol_snapshot.json"


class TestCliVersion(unittest.TestCase):
    """solar-system-dump --version prints version and exits."""

    def test_version_flag(self):
        result = subprocess.run(
            [sys.executable, "-m", "solar_system_dump.cli", "--version"],
            capture_output=True, text=True, timeout=10,
        )
        self.assertEqual(result.returncode, 0)
        self.assertIn("solar-system-dump", result.stdout)

    def test_dump_help(self):
        result = subprocess.run(
            [sys.executable, "-m", "solar_system_dump.cli", "dump", "--help"],
            capture_output=True, text=True, timeout=10,
        )
        self.assertEqual(result.returncode, 0)
        self.assertIn("--input", result.stdout)
        self.assertIn("--retrigger", result.stdout)


class TestCliDump:

    def test_dump(self, tmp_path: Path, capsys):
        assert main(["dump", "-i", str(DATA), "-o", str(tmp_path)]) == 0
        doc = json.loads((tmp_path / "SolarSystemDump.json").read_text(encoding="utf-8"))
        assert doc["rootBody"] == "Sun"
        assert doc["generator"].startswith("solar-system-dump ")
        assert "Wrote" in capsys.readouterr().out

    def test_file_name(self, tmp_path: Path):
        assert main(["dump", "-i", str(DATA), "-o", str(tmp_path), "--file-name", "k.json"]) == 0
        assert (tmp_path / "k.json").exists()

    def test_retrigger_keeps_existing(self, tmp_path: Path):
        target = tmp_path / "SolarSystemDump.json"
        target.write_text("{}\n", encoding="utf-8")
        assert main(["dump", "-i", str(DATA), "-o", str(tmp_path), "--retrigger"]) == 0
        assert target.read_text(encoding="utf-8") == "{}\n"

    def test_output_dir_from_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("SOLAR_DUMP_OUTPUT_DIR", str(tmp_path))
        assert main(["dump", "-i", str(DATA)]) == 0
        assert (tmp_path / "SolarSystemDump.json").exists()

    def test_missing_input(self, tmp_path: Path, capsys):
        assert main(["dump", "-i", str(tmp_path / "nope.json"), "-o", str(tmp_path)]) == 1
        assert "not found" in capsys.readouterr().err

    def test_invalid_input(self, tmp_path: Path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        assert main(["dump", "-i", str(bad), "-o", str(tmp_path)]) == 1
        assert "Invalid snapshot" in capsys.readouterr().err

    def test_unwritable_output(self, tmp_path: Path, capsys):
        assert main(["dump", "-i", str(DATA), "-o", str(tmp_path / "missing")]) == 1
        assert "could not write" in capsys.readouterr().err

    def test_no_command(self):
        assert main([]) == 1

    def test_version_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
