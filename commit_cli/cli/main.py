"""CLI Main Entry Point"""

import time
from typing import Callable

from commit_cli.config import Config, load_config
from commit_cli.git import GitClient, GitError, FileChange
from commit_cli.output import success, warning, info, dim, bold, print_error, print_success, colorize_commit_type, RULE
from commit_cli.prompts import Prompter

from commit_cli.cli.args import parse_args
from commit_cli.cli.commands import display_config, run_install_completion

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def _display_file_list(files: list[FileChange], max_shown: int) -> None:
    """Show which files are staged, collapsing long lists."""
    if not files:
        return
    print(bold("Staged changes:"))
    shown = files[:max_shown]
    remaining = len(files) - len(shown)
    for f in shown:
        print(dim(f"  {f.path} (+{f.additions} -{f.deletions})"))
    if remaining > 0:
        print(dim(f"  ... and {remaining} more files"))


def _display_message(message: str) -> None:
    """Display commit message with horizontal rules and colored type."""
    colored = colorize_commit_type(message)
    lines = colored.split('\n')
    # Use raw message for width calculation (no ANSI codes)
    raw_lines = message.split('\n')
    width = max(max((len(line) for line in raw_lines), default=0), 50)
    print(f"\n{success('Commit message:')}")
    print(dim(RULE * width))
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print(dim(RULE * width))


def _print_verbose_stats(verbose: bool, timings: dict) -> None:
    if not verbose:
        return
    parts = ', '.join(f"{name}={seconds:.2f}s" for name, seconds in timings.items())
    print(dim(f"  Timings: {parts}"))


def _check_staged(git: GitClient, config: Config, timings: dict) -> bool:
    """Return True when something is staged, printing the staged file list."""
    t0 = time.time()
    staged = git.has_staged_changes()
    files = git.get_staged_files() if staged else []
    timings['git'] = time.time() - t0

    if not staged:
        print_error("No staged changes. Run 'git add' first.")
        return False

    _display_file_list(files, config.max_file_display)
    return True


def run_commit_flow(config: Config, git: GitClient, read: Callable[[str], str] = input,
                    verbose: bool = False) -> int:
    """Prompt for the commit fields, confirm, and commit.

    Returns:
        int: Exit code
    """
    timings = {}
    try:
        if not _check_staged(git, config, timings):
            return EXIT_FAILURE
    except GitError as e:
        print_error(str(e))
        return EXIT_FAILURE

    print(f"\n{info(bold('=== Commit Helper ==='))}\n")

    prompter = Prompter(config, read=read)
    try:
        record = prompter.collect()
        _display_message(record.message)
        confirmed = prompter.confirm()
    except (KeyboardInterrupt, EOFError):
        print()
        print_error("Aborted.")
        _print_verbose_stats(verbose, timings)
        return EXIT_INTERRUPTED

    if not confirmed:
        print(warning("Commit cancelled."))
        _print_verbose_stats(verbose, timings)
        return EXIT_OK

    message = record.message
    t0 = time.time()
    try:
        result = git.commit(message)
    except GitError as e:
        print_error(str(e))
        return EXIT_FAILURE
    timings['commit'] = time.time() - t0
    _print_verbose_stats(verbose, timings)

    if not result.success:
        print_error(f"Commit failed:\n{result.output.rstrip()}")
        return EXIT_FAILURE

    print()
    print_success(bold("Committed"))
    print(message)
    print(dim("\nPush with 'git push' when ready."))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.install_completion:
        return run_install_completion()

    config = load_config(prefix=args.prefix, require_capital=args.require_capital)

    if args.display_config:
        return display_config(config)

    try:
        git = GitClient()
    except GitError as e:
        print_error(str(e))
        return EXIT_FAILURE

    return run_commit_flow(config, git, verbose=args.verbose)
