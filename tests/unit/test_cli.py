"""Tests for the scoring command-line entry point."""

import json

import pandas as pd

from src.cli import main


class TestScoreCommand:
    def test_scores_csv(self, tmp_path, sample_csv_text, capsys):
        path = tmp_path / "upload.csv"
        path.write_text(sample_csv_text, encoding="utf-8")

        assert main(["score", str(path)]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["summary"] == {
            "total": 2,
            "fraudulent": 1,
            "legitimate": 1,
            "fraud_rate": 50.0,
        }
        assert "quality" not in output

    def test_quality_report(self, tmp_path, capsys):
        path = tmp_path / "partial.csv"
        path.write_text("Accounts,V1\nSCB-1,abc\n", encoding="utf-8")

        assert main(["score", str(path), "--quality"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["quality"]["rows_with_issues"] == 1
        assert output["quality"]["missing"]["Time"] == 1

    def test_quality_report_sees_raw_cells(self, tmp_path, capsys):
        path = tmp_path / "dirty.csv"
        path.write_text("Accounts,Time,V1\nSCB-1,,abc\n", encoding="utf-8")

        assert main(["score", str(path), "--quality"]) == 0
        quality = json.loads(capsys.readouterr().out)["quality"]
        assert quality["non_numeric"] == {"V1": 1}
        assert quality["missing"]["Time"] == 1
        assert "V1" not in quality["missing"]

    def test_writes_assessments(self, tmp_path, sample_csv_text, capsys):
        path = tmp_path / "upload.csv"
        path.write_text(sample_csv_text, encoding="utf-8")
        out = tmp_path / "results" / "scored.csv"

        assert main(["score", str(path), "--output", str(out)]) == 0
        df = pd.read_csv(out)
        assert list(df["row"]) == [1, 2]
        assert list(df["account"]) == ["SCB-123-456-7890", "BANKX"]
        assert list(df["label"]) == ["Legitimate", "Fraudulent"]
        assert list(df["risk_level"]) == ["safe", "high"]

    def test_rejects_non_csv(self, tmp_path, capsys):
        path = tmp_path / "upload.txt"
        path.write_text("Accounts\nX\n")

        assert main(["score", str(path)]) == 1
        assert "CSV" in capsys.readouterr().err


class TestSampleCommand:
    def test_scores_generated_rows(self, capsys):
        assert main(["sample", "--count", "5", "--seed", "3"]) == 0
        summary = json.loads(capsys.readouterr().out)["summary"]
        assert summary["total"] == 5
        assert summary["fraudulent"] + summary["legitimate"] == 5

    def test_sample_output_is_rescorable(self, tmp_path, capsys):
        out = tmp_path / "sample.csv"
        assert main(["sample", "--count", "3", "--output", str(out)]) == 0
        capsys.readouterr()

        df = pd.read_csv(out)
        assert list(df.columns) == ["Accounts", "Time", *(f"V{i}" for i in range(1, 29))]
        assert len(df) == 3

        assert main(["score", str(out)]) == 0
        assert json.loads(capsys.readouterr().out)["summary"]["total"] == 3

    def test_sample_results_option(self, tmp_path, capsys):
        out = tmp_path / "scored.csv"
        assert main(["sample", "--count", "4", "--results", str(out)]) == 0
        df = pd.read_csv(out)
        assert list(df["row"]) == [1, 2, 3, 4]
        assert "risk_level" in df.columns
