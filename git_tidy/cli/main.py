"""Command-line interface for git-tidy"""

import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from git_tidy.cli.args import parse_args
from git_tidy.config import Config
from git_tidy.core import CleanupOrchestrator
from git_tidy.utils.logging import setup_logging

console = Console()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    orchestrator = None
    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config(
            remote_name=parsed_args.remote,
            check_network=not parsed_args.no_network_check,
            probe_url=parsed_args.probe_url,
            probe_timeout=parsed_args.probe_timeout,
            switch_to_primary=not parsed_args.no_switch,
            strict_primary=parsed_args.strict_primary,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        orchestrator = CleanupOrchestrator(os.getcwd(), config)
        outcome = orchestrator.run()
        return outcome.exit_code
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        if orchestrator is not None:
            _print_interrupt_state(orchestrator)
        return 1
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return 1


def _print_interrupt_state(orchestrator: CleanupOrchestrator) -> None:
    """Tell the user what an interrupted run may have left behind."""
    git_service = orchestrator.git_service
    if git_service is not None and git_service.in_git_operation:
        console.print("[yellow]A git command was running; the repository may be mid-operation.[/yellow]")

    report = orchestrator.report
    if report is None:
        return
    if report.stash is not None and not report.stash.resolved:
        console.print(f"[yellow]Uncommitted changes are stashed as '{escape(report.stash.name)}'.[/yellow]")
    if report.backup_path:
        console.print(f"[yellow]Branch names from before the cleanup: {escape(report.backup_path)}[/yellow]")


if __name__ == "__main__":
    sys.exit(main())
