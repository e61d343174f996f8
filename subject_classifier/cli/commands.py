"""CLI Commands"""

import os
import sys

from subject_classifier.config import load_config, get_config_path
from subject_classifier.output import bold, dim, info

PROG = 'subject-classifier'


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .scrc found)")

    env_format = os.environ.get('SC_FORMAT')
    if env_format:
        print(f"  {dim('Environment overrides:')}")
        print(f"    SC_FORMAT={env_format}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    format:                 {info(config.format)}")
    print(f"    show_icon:              {info(str(config.show_icon).lower())}")
    print(f"    show_scope:             {info(str(config.show_scope).lower())}")
    print(f"    strict:                 {info(str(config.strict).lower())}")
    print(f"    max_description_length: {info(str(config.max_description_length))}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .scrc (in current directory)")
    print(f"    Global: ~/.scrc\n")

    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')
    line = f'eval "$(register-python-argcomplete {PROG})"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim(f'source {rc_file}')}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print(f"  register-python-argcomplete --shell powershell {PROG} | Out-String | Invoke-Expression\n")
        print("To make it permanent, add it to your $PROFILE.")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print(f"  register-python-argcomplete --shell fish {PROG} | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
