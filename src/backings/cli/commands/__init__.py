"""CLI command implementations for the backings application.

This package contains subcommands for the backings CLI, including:
- validate: Validate a layout document
"""

from backings.cli.commands.validate import validate_command

__all__ = ["validate_command"]
