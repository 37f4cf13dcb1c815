"""
CLI command modules for family_tree.

Each command module defines a single Typer-compatible command function.
"""

from family_tree.cli.commands.add import add_command
from family_tree.cli.commands.generations import generations_command
from family_tree.cli.commands.menu import menu_command
from family_tree.cli.commands.reset import reset_command
from family_tree.cli.commands.show import show_command
from family_tree.cli.commands.stats import stats_command

__all__ = [
    "add_command",
    "generations_command",
    "menu_command",
    "reset_command",
    "show_command",
    "stats_command",
]
