"""CLI Commands"""

import os
import sys

from commit_cli import COMMIT_TYPES
from commit_cli.config import Config, env_overrides
from commit_cli.output import bold, dim, info


def display_config(config: Config) -> int:
    """Display effective configuration."""
    print(f"\n{bold('Current Configuration')}\n")

    overrides = env_overrides()
    if overrides:
        print(f"  {dim('Environment overrides:')}")
        for name, value in overrides.items():
            print(f"    {name}={value}")
        print()

    print(f"  {bold('Settings:')}")
    print(f"    work_item_prefix:       {info(config.work_item_prefix)}")
    print(f"    require_capital:        {info(str(config.require_capital).lower())}")
    print(f"    max_description_length: {info(str(config.max_description_length))}")
    print(f"    max_file_display:       {info(str(config.max_file_display))}")

    print(f"\n  {bold('Commit types:')}")
    for i, ct in enumerate(COMMIT_TYPES, 1):
        print(f"    {i:>2}. {ct.code:<8} {dim(ct.description)}")

    print(f"\n  {dim('Override with')} --prefix / --require-capital {dim('or')} CCM_PREFIX / CCM_REQUIRE_CAPITAL\n")
    return 0


def run_install_completion() -> int:
    """Print shell tab completion setup."""
    shell = os.environ.get('SHELL', '')
    line = 'eval "$(register-python-argcomplete ccm)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell ccm | Out-String | Invoke-Expression\n")
        print("To make it permanent, add the same line to your $PROFILE.")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish ccm | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
