"""CLI command implementations for the paintquote application.

This package contains subcommands for the paintquote CLI, including:
- validate: Validate an estimate file
"""

from paintquote.cli.commands.validate import validate_command

__all__ = ["validate_command"]
