"""Interactive prompts that loop until the operator gives valid input."""

from typing import Callable

from commit_cli import COMMIT_TYPES, CommitType
from commit_cli.config import Config
from commit_cli.message import CommitRecord
from commit_cli.output import bold, dim, warning, print_rejection
from commit_cli.validators import (
    normalize_work_item,
    validate_work_item,
    parse_type_choice,
    description_problems,
)

CONFIRM_ANSWERS = ('y', 'yes')


class Prompter:
    """Collects a CommitRecord from a blocking line reader.

    `read` has the signature of the builtin input(): it shows a prompt and
    returns one line without the trailing newline. KeyboardInterrupt and
    EOFError from it propagate to the caller.
    """

    def __init__(self, config: Config, read: Callable[[str], str] = input,
                 commit_types: tuple[CommitType, ...] = COMMIT_TYPES):
        self.config = config
        self.read = read
        self.commit_types = commit_types

    def ask_work_item(self) -> str:
        prefix = self.config.work_item_prefix
        label = warning(f"1. Work item ({prefix}-<number> or {prefix}-<number>-<suffix>): ")
        while True:
            work_item = normalize_work_item(self.read(label))
            if validate_work_item(work_item, prefix):
                return work_item
            print_rejection(f"Invalid work item. Expected e.g. {prefix}-123 or {prefix}-123-hotfix")

    def ask_commit_type(self) -> str:
        count = len(self.commit_types)
        print(f"\n{warning('2. Commit type:')}")
        for i, ct in enumerate(self.commit_types, 1):
            print(f"   {i:>2}. {ct.code:<8} {dim(ct.description)}")

        while True:
            idx = parse_type_choice(self.read(f"   Select [1-{count}]: "), count)
            if idx is not None:
                return self.commit_types[idx].code
            print_rejection(f"Enter a number between 1 and {count}")

    def ask_description(self) -> str:
        max_length = self.config.max_description_length
        rules = f"English letters, digits, spaces and , . ! ? - ( ), max {max_length} characters"
        if self.config.require_capital:
            rules += ", starting with a capital letter"
        print(f"\n{warning('3. Short description')} {dim(f'({rules})')}")

        while True:
            desc = self.read("   Description: ").strip()
            problems = description_problems(desc, max_length, self.config.require_capital)
            if not problems:
                return desc
            print_rejection("Invalid description: " + "; ".join(problems))

    def ask_body(self) -> str:
        """Read body lines until a blank line. Any text is allowed."""
        print(f"\n{warning('4. Details')} {dim('(optional, multiple lines, empty line to finish)')}")
        lines = []
        while True:
            line = self.read("")
            if not line.strip():
                break
            lines.append(line)
        return '\n'.join(lines)

    def collect(self) -> CommitRecord:
        work_item = self.ask_work_item()
        commit_type = self.ask_commit_type()
        description = self.ask_description()
        body = self.ask_body()
        return CommitRecord(
            work_item=work_item,
            commit_type=commit_type,
            description=description,
            body=body,
        )

    def confirm(self) -> bool:
        answer = self.read(f"{bold('Confirm commit?')} (y/N): ").strip().lower()
        return answer in CONFIRM_ANSWERS
