"""Git Client - Check staged changes and create the commit."""

import subprocess
from dataclasses import dataclass


@dataclass
class FileChange:
    """A single staged file's line counts."""
    path: str
    additions: int
    deletions: int


@dataclass
class CommitResult:
    """Outcome of `git commit`, with stdout and stderr combined."""
    success: bool
    output: str


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitClient:
    """Thin wrapper over the git executable."""

    def __init__(self):
        self._verify_git_available()
        self._verify_in_repo()

    def _run(self, *args: str, merge_output: bool = False) -> subprocess.CompletedProcess:
        """Run a git command without raising on a non-zero exit code."""
        try:
            return subprocess.run(
                ['git', *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if merge_output else subprocess.PIPE,
                text=True,
                encoding='utf-8',
                errors='replace'
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        result = self._run(*args)
        if result.returncode != 0:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{result.stderr}")
        return result.stdout

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise GitError("Not inside a git repository")

    def has_staged_changes(self) -> bool:
        """`git diff --cached --quiet` exits 1 when something is staged."""
        result = self._run('diff', '--cached', '--quiet')
        if result.returncode == 0:
            return False
        if result.returncode == 1:
            return True
        raise GitError(f"Git command failed: git diff --cached --quiet\n{result.stderr}")

    def get_staged_files(self) -> list[FileChange]:
        """Parse 'git diff --cached --numstat' output."""
        output = self._run_git('diff', '--cached', '--numstat')

        if not output.strip():
            return []

        files = []
        for line in output.strip().split('\n'):
            parts = line.split('\t')
            if len(parts) >= 3:
                # Binary files report '-' for both counts
                additions = int(parts[0]) if parts[0] != '-' else 0
                deletions = int(parts[1]) if parts[1] != '-' else 0
                files.append(FileChange(path=parts[2], additions=additions, deletions=deletions))

        return files

    def commit(self, message: str) -> CommitResult:
        result = self._run('commit', '-m', message, merge_output=True)
        return CommitResult(success=result.returncode == 0, output=result.stdout)
