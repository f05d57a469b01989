"""Tests for the command line interface."""

import csv
import json

import pytest

from resume_screener.cli import main, parse_weight_overrides
from resume_screener.core.errors import ConfigurationError
from resume_screener.core.models import CriteriaWeights


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    for name in CriteriaWeights.KEYS:
        monkeypatch.delenv(f"SCREENER_WEIGHT_{name.upper()}", raising=False)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "batch": {"throttle_seconds": 0},
        "export": {"output_dir": str(tmp_path / "exports")},
    }))
    return path


@pytest.fixture
def resume_dir(tmp_path, jane_resume):
    folder = tmp_path / "resumes"
    folder.mkdir()
    (folder / "jane.txt").write_text(jane_resume, encoding="utf-8")
    (folder / "sam.txt").write_text("Sam Green\n1 years experience with Excel", encoding="utf-8")
    return folder


class TestParseWeightOverrides:
    """Tests for NAME=VALUE weight overrides."""

    def test_overrides_applied(self):
        weights = parse_weight_overrides(["skills=0.5", "Keywords = 0.3"], CriteriaWeights())

        assert weights.skills == 0.5
        assert weights.keywords == 0.3
        assert weights.experience == 0.3

    @pytest.mark.parametrize("override", ["skills", "luck=0.2", "skills=high", "skills=1.5"])
    def test_invalid_override(self, override):
        with pytest.raises(ConfigurationError):
            parse_weight_overrides([override], CriteriaWeights())


class TestCli:
    """End-to-end tests for the CLI commands."""

    def test_screen_and_export(self, config_file, resume_dir, job_description, tmp_path, capsys):
        output = tmp_path / "results.csv"

        main([
            "--config", str(config_file),
            "screen", str(resume_dir),
            "--job-text", job_description,
            "--output", str(output),
            "--details",
        ])

        printed = capsys.readouterr().out
        assert "Screening 2 resumes" in printed
        assert "Analysis complete: 2 completed, 0 errors" in printed
        assert "1. Jane Doe (jane.txt)" in printed

        with open(output, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert len(rows) == 3
        assert rows[1][:5] == ["1", "Jane Doe", "jane@example.com", "(555) 123-4567", "53"]
        assert rows[2][1] == "Sam Green"

    def test_screen_with_job_file_and_json_export(self, config_file, resume_dir, job_description, tmp_path):
        job_file = tmp_path / "job.txt"
        job_file.write_text(job_description, encoding="utf-8")

        main([
            "--config", str(config_file),
            "screen", str(resume_dir / "jane.txt"),
            "--job", str(job_file),
            "--export", "--format", "json",
        ])

        exports = list((tmp_path / "exports").glob("resume_analysis_*.json"))
        assert len(exports) == 1
        assert json.loads(exports[0].read_text(encoding="utf-8"))[0]["Overall Score"] == 53

    def test_screen_json_report(self, config_file, resume_dir, job_description, capsys):
        main([
            "--config", str(config_file),
            "screen", str(resume_dir),
            "--job-text", job_description,
            "--json",
        ])

        printed = capsys.readouterr().out
        report = json.loads(printed[printed.index("{"):])

        assert report["result"] == {"processed": 2, "completed": 2, "errors": 0, "cancelled": False}
        assert report["summary"]["remaining"] == 0
        assert report["summary"]["analyzed"]
        assert report["documents"][0]["contact"]["name"] == "Jane Doe"
        assert report["documents"][0]["analysis"]["overall_score"] == 53
        assert report["documents"][1]["status"] == "completed"

    def test_screen_without_supported_files(self, config_file, tmp_path, capsys):
        image = tmp_path / "photo.png"
        image.write_bytes(b"\x89PNG")

        main(["--config", str(config_file), "screen", str(image), "--job-text", "Python"])

        assert "No supported resumes found" in capsys.readouterr().out

    def test_invalid_weight_exits(self, config_file, resume_dir, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([
                "--config", str(config_file),
                "screen", str(resume_dir),
                "--job-text", "Python",
                "--weight", "skills=2",
            ])

        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_blank_job_description_exits(self, config_file, resume_dir, capsys):
        with pytest.raises(SystemExit):
            main(["--config", str(config_file), "screen", str(resume_dir), "--job-text", "  "])

        assert "Please enter a job description first." in capsys.readouterr().out

    def test_config_set_weight(self, config_file):
        main(["--config", str(config_file), "config", "--set", "weights.skills", "0.6"])

        saved = json.loads(config_file.read_text())
        assert saved["weights"]["skills"] == 0.6
        assert saved["batch"]["throttle_seconds"] == 0

    def test_config_set_invalid_weight(self, config_file):
        with pytest.raises(SystemExit):
            main(["--config", str(config_file), "config", "--set", "weights.skills", "7"])

        assert "weights" not in json.loads(config_file.read_text())

    def test_config_init(self, tmp_path, capsys):
        path = tmp_path / "fresh" / "config.json"

        main(["--config", str(path), "config", "--init"])

        assert path.exists()
        assert "Created config" in capsys.readouterr().out

    def test_no_command(self, capsys):
        with pytest.raises(SystemExit):
            main([])
