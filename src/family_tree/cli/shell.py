"""
Line-oriented menu for editing a tree interactively.

At every prompt ``exit`` (or ``EXIT``) ends the program without saving and
``back`` returns to the main menu.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console

from family_tree.core.exceptions import TreeSaveError
from family_tree.logging import get_logger
from family_tree.tree import FamilyTree

log = get_logger(__name__)

EXIT_TOKENS = ("exit", "EXIT")
BACK_TOKEN = "back"
RULE = "-" * 42

MAIN_MENU = [
    RULE,
    "Main Menu (type 'exit' to terminate):",
    "  1) Add a new Person",
    "  2) Print the Family Tree",
    "  3) Save & Quit",
    "  4) Just Quit",
    "  5) Restore to Default",
    RULE,
]


class ShellExit(Exception):
    """The user typed ``exit``."""


class ShellBack(Exception):
    """The user typed ``back``."""


def is_numeric(text: str) -> bool:
    """Digits only, or exactly ``-1`` (the death year of the living)."""
    if text == "-1":
        return True
    return bool(text) and text.isascii() and text.isdigit()


class MenuShell:
    def __init__(
        self,
        tree: FamilyTree,
        data_path: Path,
        *,
        root_id: int = 0,
        console: Optional[Console] = None,
        input_fn: Optional[Callable[[str], str]] = None,
    ):
        self.tree = tree
        self.data_path = Path(data_path)
        self.root_id = root_id
        self.console = console or Console()
        self._input = input_fn or self.console.input
        self.saved = False

    # ------------------------------------------------------------------ #
    # I/O helpers
    # ------------------------------------------------------------------ #

    def say(self, message: str = "") -> None:
        self.console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def ask(self, prompt: str, *, allow_back: bool = True) -> str:
        """Return the raw answer; surrounding spaces are kept for names."""
        answer = self._input(prompt)
        token = answer.strip()
        if token in EXIT_TOKENS:
            raise ShellExit()
        if allow_back and token == BACK_TOKEN:
            raise ShellBack()
        return answer

    def ask_number(self, prompt: str, complaint: str) -> int:
        while True:
            answer = self.ask(prompt).strip()
            if is_numeric(answer):
                return int(answer)
            self.say(complaint)

    def ask_choice(self, prompt: str, upper: int, complaint: str, out_of_range: str) -> int:
        """Ask for a 1-based choice and return it 0-based."""
        while True:
            answer = self.ask(prompt).strip()
            if not is_numeric(answer):
                self.say(complaint)
                continue
            choice = int(answer) - 1
            if 0 <= choice < upper:
                return choice
            self.say(out_of_range)

    # ------------------------------------------------------------------ #
    # Menu actions
    # ------------------------------------------------------------------ #

    def print_tree(self, title: str) -> None:
        self.say(title)
        self.tree.print_family_tree(self.root_id, console=self.console)

    def add_person(self) -> None:
        self.say()
        self.say("[Add Person - type 'exit' to quit, 'back' to return.]")

        generations = self.tree.get_generations(self.root_id)
        if not generations:
            self.say("No valid root or empty tree! Cannot add.")
            return

        self.say(
            f"We have {len(generations)} generation(s) under index {self.root_id}."
        )
        for g, members in enumerate(generations):
            self.say(f"  Generation #{g + 1} has {len(members)} person(s).")

        gen = self.ask_choice(
            f"Which generation is the parent in? (1 to {len(generations)}, 'back' to menu): ",
            len(generations),
            "[Invalid input: must be a number or 'back'.]",
            "[Invalid generation index!]",
        )
        members: List[int] = generations[gen]

        self.say()
        self.say(f"--- Members in Generation #{gen + 1} ---")
        for i, person_id in enumerate(members):
            self.say(f"  ({i + 1}) {self.tree.get_person(person_id).describe()}")
        self.say(RULE)

        pick = self.ask_choice(
            f"Pick the parent number (1 to {len(members)}, or 'back'): ",
            len(members),
            "[Please enter a valid number or 'back'.]",
            "[Invalid choice.]",
        )
        parent_id = members[pick]

        self.say()
        name = self.ask("Enter new person's name (or 'exit'/'back'): ")
        birth = self.ask_number(
            "Enter birth year (or 'exit'/'back'): ",
            "[Please enter a numeric birth year.]",
        )
        death = self.ask_number(
            "Enter death year (-1 if still alive) (or 'exit'/'back'): ",
            "[Please enter a numeric death year or -1.]",
        )

        new_id = self.tree.add_person(name, birth, death)
        self.tree.connect_parent_child(parent_id, new_id)
        log.info(f"Added #{new_id} {name} as child of #{parent_id}")

        self.say()
        self.say("[New Person Added]")
        self.say(f"   {self.tree.get_person(new_id).describe()}")
        self.say()
        self.print_tree("Updated Family Tree")
        self.say("===========================")
        self.say()

    def save(self) -> None:
        try:
            self.tree.save_to_file(self.data_path)
        except TreeSaveError as exc:
            self.say(f"[Error saving file: {exc}]")
            return
        self.saved = True
        self.say(f"[Data saved to '{self.data_path}'. Exiting...]")

    def restore_default(self) -> None:
        self.say()
        self.say(
            "[Restoring default data. All custom changes will be LOST unless you save afterward.]"
        )
        self.tree.reset_to_default()
        self.say("[All custom changes discarded. Restored default data.]")

    # ------------------------------------------------------------------ #
    # Main loop
    # ------------------------------------------------------------------ #

    def handle(self, choice: str) -> bool:
        """Run one menu choice; return False when the session should end."""
        if choice == "1":
            self.add_person()
        elif choice == "2":
            self.say()
            self.print_tree("Current Family Tree")
            self.say("===================")
            self.say()
        elif choice == "3":
            self.save()
            return False
        elif choice == "4":
            self.say("[Exiting without saving changes.]")
            return False
        elif choice == "5":
            self.restore_default()
        else:
            self.say("[Invalid option. Please choose 1-5 or type 'exit'.]")
        return True

    def run(self) -> None:
        running = True
        while running:
            for line in MAIN_MENU:
                self.say(line)
            try:
                # "back" has nowhere to go from here and is reported as invalid.
                choice = self.ask("Your choice: ", allow_back=False).strip()
                running = self.handle(choice)
            except ShellBack:
                continue
            except (ShellExit, EOFError, KeyboardInterrupt):
                self.say("[Exiting program on user request.]")
                return

        self.say()
        self.say("Program Finished")
