"""Interactive Prompts Package"""

from commit_cli.prompts.prompter import Prompter, CONFIRM_ANSWERS

__all__ = ["Prompter", "CONFIRM_ANSWERS"]
