"""Tests for the command-line interface"""
import importlib
import io
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from git_tidy.cli.args import parse_args
from git_tidy.constants import CLEANUP_LOG_FILE, DEFAULT_PROBE_TIMEOUT, DEFAULT_PROBE_URL
from git_tidy.models.plan import CleanupPlan, ExecutionReport, RunOutcome, StashRecord

cli_main = importlib.import_module("git_tidy.cli.main")


@pytest.fixture
def mock_orchestrator():
    """Patch the orchestrator and console logging used by main()."""
    with patch.object(cli_main, "CleanupOrchestrator") as orchestrator_cls, \
            patch.object(cli_main, "setup_logging"):
        yield orchestrator_cls


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.remote == "origin"
        assert args.no_network_check is False
        assert args.probe_url == DEFAULT_PROBE_URL
        assert args.probe_timeout == DEFAULT_PROBE_TIMEOUT
        assert args.no_switch is False
        assert args.strict_primary is False
        assert args.verbose is False
        assert args.debug is False

    def test_options(self):
        args = parse_args([
            "-v", "--remote", "upstream", "--no-network-check", "--probe-timeout", "2.5",
            "--no-switch", "--strict-primary",
        ])
        assert args.verbose is True
        assert args.remote == "upstream"
        assert args.no_network_check is True
        assert args.probe_timeout == 2.5
        assert args.no_switch is True
        assert args.strict_primary is True

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("git-tidy ")


class TestMain:
    """Test exit codes and error handling of main()."""

    @pytest.mark.parametrize("outcome, code", [
        (RunOutcome.COMPLETED, 0),
        (RunOutcome.DECLINED, 0),
        (RunOutcome.FAILED, 1),
    ])
    def test_exit_code(self, mock_orchestrator, outcome, code):
        mock_orchestrator.return_value.run.return_value = outcome
        assert cli_main.main(["--no-network-check"]) == code

    def test_config_from_args(self, mock_orchestrator):
        mock_orchestrator.return_value.run.return_value = RunOutcome.COMPLETED

        cli_main.main(["--remote", "upstream", "--no-switch", "--strict-primary", "--no-network-check"])

        _, config = mock_orchestrator.call_args.args
        assert config.remote_name == "upstream"
        assert config.switch_to_primary is False
        assert config.strict_primary is True
        assert config.check_network is False

    def test_invalid_config(self, mock_orchestrator, capsys):
        assert cli_main.main(["--probe-timeout", "0"]) == 1
        mock_orchestrator.assert_not_called()
        assert "probe_timeout" in capsys.readouterr().out

    def test_unexpected_error(self, mock_orchestrator, capsys):
        mock_orchestrator.return_value.run.side_effect = RuntimeError("boom [x]")
        assert cli_main.main(["--no-network-check"]) == 1
        assert "boom [x]" in capsys.readouterr().out

    def test_keyboard_interrupt_reports_stash(self, mock_orchestrator, capsys):
        plan = CleanupPlan(primary_branch="main", original_branch="main", local_branches=("main",))
        report = ExecutionReport(plan=plan, backup_path="/repo/.git/backup_branches.txt")
        report.stash = StashRecord("git-tidy backup - branch main - 2024-05-01_13-45-09")
        orchestrator = mock_orchestrator.return_value
        orchestrator.run.side_effect = KeyboardInterrupt
        orchestrator.report = report
        orchestrator.git_service = Mock(in_git_operation=True)

        assert cli_main.main(["--no-network-check"]) == 1

        output = capsys.readouterr().out
        assert "Operation cancelled by user" in output
        assert "mid-operation" in output
        assert "2024-05-01_13-45-09" in output
        assert "backup_branches.txt" in output

    def test_keyboard_interrupt_before_execution(self, mock_orchestrator, capsys):
        orchestrator = mock_orchestrator.return_value
        orchestrator.run.side_effect = KeyboardInterrupt
        orchestrator.report = None
        orchestrator.git_service = None

        assert cli_main.main(["--no-network-check"]) == 1
        assert "Operation cancelled by user" in capsys.readouterr().out


class TestMainInRepository:
    """Run main() for real inside a working copy."""

    def test_empty_stdin_declines(self, dirty_repo, monkeypatch, capsys):
        monkeypatch.chdir(dirty_repo.working_dir)
        monkeypatch.setattr("sys.stdin", io.StringIO(""))

        with patch.object(cli_main, "setup_logging"):
            exit_code = cli_main.main(["--no-network-check"])

        assert exit_code == 0
        assert "Do you want to continue with the cleanup?" in capsys.readouterr().out
        log = (Path(dirty_repo.git_dir) / CLEANUP_LOG_FILE).read_text().splitlines()
        assert log[-1] == "[WARNING] Cleanup aborted by the user. Exiting."
        assert dirty_repo.git.stash("list") == ""
        assert dirty_repo.is_dirty(untracked_files=True)
