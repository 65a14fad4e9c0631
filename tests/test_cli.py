"""
Tests for the command-line interface.
"""

import json

import pytest

from coursemap import cli


REFERENCE_ARGS = ["--trimester-start", "2024-01-08", "--course-start", "2024-02-01"]


class TestMain:
    """Test cases for cli.main."""

    def test_maps_with_flags(self, capsys):
        """Test a fully specified run."""
        exit_code = cli.main(REFERENCE_ARGS + ["--target", "2024-02-14"])

        assert exit_code == 0
        assert "2024-04-03" in capsys.readouterr().out

    def test_json_output(self, capsys):
        """Test machine-readable output."""
        exit_code = cli.main(REFERENCE_ARGS + ["--target", "2024-03-31", "--json"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["course_date"] == "2024-06-19"
        assert data["trimester_end"] == "2024-03-31"
        assert data["course_end"] == "2024-06-19"

    def test_json_error(self, capsys):
        """Test that errors are reported as JSON with exit code 1."""
        exit_code = cli.main(REFERENCE_ARGS + ["--target", "2024-04-01", "--json"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert data["error"] == "INVALID_RANGE"

    def test_out_of_range_exit_code(self, capsys):
        """Test that a displayed error exits with 1."""
        exit_code = cli.main(REFERENCE_ARGS + ["--target", "2023-12-31"])

        assert exit_code == 1
        assert "trimester period" in capsys.readouterr().out

    def test_week_overrides(self, capsys):
        """Test that --trimester-weeks and --course-weeks are honored."""
        exit_code = cli.main([
            "--trimester-start", "2024-01-01", "--course-start", "2024-01-01",
            "--target", "2024-01-08", "--trimester-weeks", "2", "--course-weeks", "1",
            "--json",
        ])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["course_date"] == "2024-01-04"

    def test_bad_week_override(self, capsys):
        """Test that a zero-week option is refused with exit code 2."""
        exit_code = cli.main(REFERENCE_ARGS + ["--course-weeks", "0"])

        assert exit_code == 2
        assert "course_weeks" in capsys.readouterr().err

    def test_bad_week_setting_in_environment(self, monkeypatch, capsys):
        """Test that an invalid COURSEMAP_TRIMESTER_WEEKS exits with 2, not a traceback."""
        monkeypatch.setenv("COURSEMAP_TRIMESTER_WEEKS", "0")

        exit_code = cli.main(REFERENCE_ARGS + ["--target", "2024-02-14"])

        assert exit_code == 2
        assert "trimester_weeks" in capsys.readouterr().err

    def test_period_past_end_of_calendar(self, capsys):
        """Test that dates at the end of the calendar end in a displayed error."""
        exit_code = cli.main([
            "--trimester-start", "9999-12-01", "--course-start", "9999-12-01",
            "--target", "9999-12-05",
        ])

        assert exit_code == 1
        assert "9999-12-31" in capsys.readouterr().out

    def test_period_past_end_of_calendar_json(self, capsys):
        """Test the JSON error code for dates at the end of the calendar."""
        exit_code = cli.main([
            "--trimester-start", "9999-12-01", "--course-start", "2024-02-01",
            "--target", "9999-12-05", "--json",
        ])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert data["error"] == "PERIOD_OUT_OF_RANGE"

    def test_target_defaults_to_today(self, monkeypatch, capsys):
        """Test that the target falls back to default_target_date()."""
        monkeypatch.setattr(cli, "default_target_date", lambda: "2024-01-08")

        exit_code = cli.main(REFERENCE_ARGS + ["--json"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["target_date"] == "2024-01-08"
        assert data["course_date"] == "2024-02-01"

    def test_interactive_prompts(self, monkeypatch, capsys):
        """Test that missing start dates are asked for on stdin."""
        answers = iter(["2024-01-08", "2024-02-01", "2024-02-14"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        exit_code = cli.main([])

        assert exit_code == 0
        assert "2024-04-03" in capsys.readouterr().out

    def test_interactive_blank_target_uses_default(self, monkeypatch, capsys):
        """Test that pressing Enter on the target keeps the default."""
        answers = iter(["2024-01-08", "2024-02-01", ""])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        monkeypatch.setattr(cli, "default_target_date", lambda: "2024-03-31")

        exit_code = cli.main([])

        assert exit_code == 0
        assert "2024-06-19" in capsys.readouterr().out

    def test_closed_stdin_reports_missing_fields(self, monkeypatch, capsys):
        """Test that EOF on stdin ends in the missing-fields message."""
        def closed(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", closed)

        exit_code = cli.main([])

        assert exit_code == 1
        assert "Please fill in all required fields." in capsys.readouterr().out

    def test_invalid_log_level(self):
        """Test that argparse rejects an unknown log level."""
        with pytest.raises(SystemExit):
            cli.main(REFERENCE_ARGS + ["--log-level", "chatty"])
