"""Commit message assembly."""

from dataclasses import dataclass


def build_commit_message(commit_type: str, work_item: str, description: str, body: str = "") -> str:
    """Format `type(work-item): description`, plus a blank line and body if given."""
    message = f"{commit_type}({work_item}): {description}"
    if body:
        message = f"{message}\n\n{body}"
    return message


@dataclass(frozen=True)
class CommitRecord:
    """Validated answers for a single commit attempt."""
    work_item: str
    commit_type: str
    description: str
    body: str = ""

    @property
    def message(self) -> str:
        return build_commit_message(self.commit_type, self.work_item, self.description, self.body)
