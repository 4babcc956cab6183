"""
Unit tests for the run_billing command line.
"""

import pytest

import run_billing
from lesson_billing.utils.config import Config
from lesson_billing.utils.file_utils import save_json


LESSONS = [
    {
        "id": "lesson_1",
        "date": "2025-10-01",
        "student_id": "student_1",
        "student_name": "山田太郎",
        "status": "completed",
        "duration": 60,
        "category": "専属レッスン"
    },
    {
        "id": "lesson_2",
        "date": "2025-10-02",
        "student_id": "student_2",
        "student_name": "佐藤花子",
        "status": "cancelled",
        "duration": 60,
        "category": "専属レッスン"
    },
]


@pytest.fixture
def billing_config(monkeypatch, tmp_path):
    """Install a Config built from a controlled environment."""
    monkeypatch.setenv("LESSON_HOURLY_RATE", "2300")
    monkeypatch.setenv("LESSON_FLAT_RATE_CATEGORIES", "")
    monkeypatch.setenv("BILLING_CURRENCY", "JPY")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "output"))
    config = Config()
    monkeypatch.setattr(run_billing, "config", config)
    return config


@pytest.fixture
def lessons_file(tmp_path):
    path = tmp_path / "lessons.json"
    save_json(LESSONS, path)
    return path


class TestParseTargetMonth:

    def test_normalizes(self):
        assert run_billing.parse_target_month("2025-1") == "2025-01"

    @pytest.mark.parametrize("value", ["2025-13", "2025/10", "october", "2025-10-01"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            run_billing.parse_target_month(value)


class TestMain:

    def test_success(self, billing_config, lessons_file, tmp_path, capsys):
        out_dir = tmp_path / "reports"

        exit_code = run_billing.main([
            "--month", "2025-10",
            "--lessons", str(lessons_file),
            "--output-dir", str(out_dir),
        ])

        assert exit_code == 0
        output = capsys.readouterr().out
        assert "Priced:                   1" in output
        assert "Skipped:                  1" in output
        assert len(list(out_dir.glob("invoice_report_202510_*.json"))) == 1
        assert len(list(out_dir.glob("invoice_lines_202510_*.csv"))) == 1

    def test_no_export(self, billing_config, lessons_file, tmp_path):
        exit_code = run_billing.main([
            "--month", "2025-10",
            "--lessons", str(lessons_file),
            "--no-export",
        ])

        assert exit_code == 0
        assert not (tmp_path / "output").exists()

    def test_existing_invoices(self, billing_config, lessons_file, tmp_path, capsys):
        existing = tmp_path / "existing.json"
        save_json([{"date": "2025-10-01", "student_id": "student_1"}], existing)

        exit_code = run_billing.main([
            "--month", "2025-10",
            "--lessons", str(lessons_file),
            "--existing", str(existing),
            "--no-export",
        ])

        assert exit_code == 0
        assert "Priced:                   0" in capsys.readouterr().out

    def test_failed_lesson_returns_error(self, billing_config, tmp_path):
        path = tmp_path / "lessons.json"
        lesson = dict(LESSONS[0])
        del lesson["duration"]
        save_json([lesson], path)

        exit_code = run_billing.main([
            "--month", "2025-10",
            "--lessons", str(path),
            "--no-export",
        ])

        assert exit_code == 1

    def test_missing_lessons_file(self, billing_config, tmp_path):
        exit_code = run_billing.main([
            "--month", "2025-10",
            "--lessons", str(tmp_path / "missing.json"),
        ])

        assert exit_code == 1

    def test_invalid_month(self, billing_config, lessons_file):
        exit_code = run_billing.main([
            "--month", "2025-13",
            "--lessons", str(lessons_file),
        ])

        assert exit_code == 1

    def test_fractional_duration_is_displayed(self, billing_config, tmp_path, capsys):
        path = tmp_path / "lessons.json"
        save_json([dict(LESSONS[0], duration=90.5)], path)

        exit_code = run_billing.main([
            "--month", "2025-10",
            "--lessons", str(path),
            "--no-export",
        ])

        assert exit_code == 0
        output = capsys.readouterr().out
        assert "90.5min" in output
        assert "3,469 JPY" in output

    @pytest.mark.parametrize("existing_data", [["2025-10-01"], [{"date": "2025-10-01"}, 5]])
    def test_existing_entries_must_be_objects(
        self, billing_config, lessons_file, tmp_path, capsys, existing_data
    ):
        existing = tmp_path / "existing.json"
        save_json(existing_data, existing)

        exit_code = run_billing.main([
            "--month", "2025-10",
            "--lessons", str(lessons_file),
            "--existing", str(existing),
            "--no-export",
        ])

        assert exit_code == 1
        assert "Invalid existing invoice entries" in capsys.readouterr().out
