"""Tests for the command-line interface."""

import json
from datetime import date

from cli.main import build_parser, main


class TestParser:
    """Test argument parsing."""

    def test_global_options(self, tmp_path):
        """Test global options come before the command."""
        args = build_parser().parse_args(
            ["--base-dir", str(tmp_path), "--verbose", "end", "--dry-run"]
        )

        assert args.base_dir == tmp_path
        assert args.verbose is True
        assert args.command == "end"
        assert args.dry_run is True

    def test_defaults(self):
        """Test options default to live mode under the current directory."""
        args = build_parser().parse_args(["start"])

        assert args.base_dir is None
        assert args.config is None
        assert args.templates is None
        assert args.dry_run is False


class TestMain:
    """Test command dispatch and exit codes."""

    def test_no_command(self, capsys):
        """Test running without a command prints help and fails."""
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().out

    def test_start_dry_run(self, workspace, capsys):
        """Test work-start prints the compose command and records today."""
        assert main(["--base-dir", str(workspace), "start", "--dry-run"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("[DRY-RUN] tb -compose format=plain,to='alice@example.com',cc='',")
        assert "body='Working remotely from {time}.'" in out

        stored = json.loads((workspace / "data" / "work_times.json").read_text(encoding="utf-8"))
        assert list(stored) == [date.today().isoformat()]

    def test_end_dry_run_uses_recorded_start(self, workspace, capsys):
        """Test work-end reads the start time recorded today."""
        store_path = workspace / "data" / "work_times.json"
        store_path.parent.mkdir()
        store_path.write_text(json.dumps({date.today().isoformat(): "07:15"}), encoding="utf-8")

        assert main(["--base-dir", str(workspace), "end", "--dry-run"]) == 0
        assert "body='Worked 07:15-" in capsys.readouterr().out

    def test_error_exit_code(self, workspace, capsys):
        """Test an AppError is reported on stderr with exit code 1."""
        (workspace / "config" / "address_book.json").write_text("[]", encoding="utf-8")

        assert main(["--base-dir", str(workspace), "start", "--dry-run"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Not Found: no email address registered for name: Alice" in captured.err
        assert "Hint:" in captured.err

    def test_undecodable_address_book(self, workspace, capsys):
        """Test a non-UTF-8 input file is reported, not raised."""
        (workspace / "config" / "address_book.json").write_bytes(b"\xff\xfe")

        assert main(["--base-dir", str(workspace), "start", "--dry-run"]) == 1
        assert "Error: Internal Server Error" in capsys.readouterr().err

    def test_missing_configuration(self, tmp_path, capsys):
        """Test a missing app.json fails with an internal error."""
        assert main(["--base-dir", str(tmp_path), "end", "--dry-run"]) == 1
        assert "Error: Internal Server Error" in capsys.readouterr().err

    def test_custom_template_path(self, workspace, capsys):
        """Test --templates overrides the default templates file."""
        custom = workspace / "custom.json"
        templates = json.loads(
            (workspace / "config" / "mail_templates.json").read_text(encoding="utf-8")
        )
        templates["remote_work_start"]["subject_template"] = "custom {time}"
        custom.write_text(json.dumps(templates), encoding="utf-8")

        args = ["--base-dir", str(workspace), "--templates", "custom.json", "start", "--dry-run"]
        assert main(args) == 0
        assert "subject='custom " in capsys.readouterr().out

    def test_show_config(self, workspace, capsys):
        """Test the loaded configuration is printed."""
        assert main(["--base-dir", str(workspace), "show-config"]) == 0

        out = capsys.readouterr().out
        assert "From: Taro" in out
        assert "Department: Dev" in out
        assert "Thunderbird: tb" in out

    def test_list_addresses(self, workspace, capsys):
        """Test the address book is listed with its count."""
        assert main(["--base-dir", str(workspace), "list-addresses"]) == 0

        out = capsys.readouterr().out
        assert "=== Address Book ===" in out
        assert "Name: Alice, Address: alice@example.com" in out
        assert "Total entries: 1" in out
