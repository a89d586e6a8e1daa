"""
Conventional Commit Helper

Interactive prompts that build a ticket-tagged commit message and commit it.
"""

from typing import NamedTuple

__version__ = "1.0.0"


class CommitType(NamedTuple):
    code: str
    description: str


# Ordered catalog - display numbering depends on this order
COMMIT_TYPES = (
    CommitType('feat', 'A new feature'),
    CommitType('fix', 'A bug fix'),
    CommitType('docs', 'Documentation only changes'),
    CommitType('style', 'Changes that do not affect code meaning'),
    CommitType('refactor', 'Neither fixes bug nor adds feature'),
    CommitType('perf', 'A code change that improves performance'),
    CommitType('test', 'Adding or correcting tests'),
    CommitType('build', 'Affect build system or dependencies'),
    CommitType('ci', 'Changes to CI configuration files'),
    CommitType('chore', 'Other changes'),
)
