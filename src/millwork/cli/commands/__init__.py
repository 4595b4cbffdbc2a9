"""CLI subcommands for the millwork application.

- templates: Manage module configuration templates
"""

from millwork.cli.commands.templates import templates_app

__all__ = ["templates_app"]
