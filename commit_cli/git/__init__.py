"""Git Operations Package"""

from commit_cli.git.client import GitClient, GitError, FileChange, CommitResult

__all__ = [
    "GitClient",
    "GitError",
    "FileChange",
    "CommitResult",
]
