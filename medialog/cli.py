"""Menu-driven command line for the media library."""

from __future__ import annotations

import sys
from typing import List, Optional

from .entries import MAX_STRING, PathLike, is_nonblank
from .interactive import Console, delete_entry, edit_entry, read_entries, save_entry

DEFAULT_FILENAME = "full_media_list.csv"


def _saving_mode(console: Console, filename: PathLike) -> None:
    console.say("\n--- Saving Mode ---")
    console.say("1. Create New Entry")
    console.say("2. Edit Existing Entry")
    console.say("3. Delete Entry")
    console.say("4. Return to Main Menu")
    submode = console.ask_int("Enter your choice: ")
    if submode == 1:
        save_entry(filename, console)
    elif submode == 2:
        edit_entry(filename, console)
    elif submode == 3:
        delete_entry(filename, console)
    elif submode == 4:
        return
    else:
        console.say("Invalid choice. Returning to main menu.")


def run(console: Console, filename: PathLike) -> None:
    """Show the main menu until the user exits or input runs out."""
    while True:
        console.say("\n=== Media Database Manager ===")
        console.say("1. Saving Mode (Create, Edit, Delete)")
        console.say("2. Reading Mode (Search & View)")
        console.say("3. Exit")
        mode = console.ask_int("Enter your choice: ")
        if mode is None:
            console.say("Invalid input. Exiting.")
            break
        if mode == 1:
            _saving_mode(console, filename)
        elif mode == 2:
            read_entries(filename, console)
        elif mode == 3:
            console.say("Exiting program. Goodbye!")
            break
        else:
            console.say("Invalid mode. Try again.")


def main(argv: Optional[List[str]] = None) -> int:
    """Start the media manager; the first argument names the CSV file."""
    args = sys.argv[1:] if argv is None else argv
    console = Console()
    filename = DEFAULT_FILENAME
    if args:
        filename = args[0][: MAX_STRING - 1]
    else:
        answer = console.ask(
            f"Enter CSV file name (or press Enter for default '{filename}'): "
        )
        if answer is not None and is_nonblank(answer):
            filename = answer
    run(console, filename)
    return 0


if __name__ == "__main__":
    sys.exit(main())