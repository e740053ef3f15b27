"""Interactive prompts for adding, editing, searching and deleting entries."""

from __future__ import annotations

import re
import sys
from typing import Callable, List, Optional, TextIO

from .entries import (
    MAX_ENTRIES,
    MAX_STRING,
    Field,
    MediaEntry,
    PathLike,
    append_entry,
    is_nonblank,
    is_valid_link,
    is_valid_media_type,
    load_entries,
    search_entries,
    write_entries,
)

Validator = Callable[[Optional[str]], bool]

_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")
_RULE = "-" * 45

_SAVE_PROMPTS = (
    (Field.TITLE, "Enter title: ", is_nonblank),
    (Field.TYPE, "Enter type (Movie, Book, Album, Show): ", is_valid_media_type),
    (Field.AUTHOR, "Enter author/director/artist: ", is_nonblank),
    (Field.DURATION, "Enter duration/pages: ", is_nonblank),
    (Field.GENRE, "Enter genre: ", is_nonblank),
    (Field.COMMENT, "Enter comments: ", is_nonblank),
    (Field.LINK, "Enter link (e.g., http:// or www.): ", is_valid_link),
)

_EDIT_PROMPTS = (
    (Field.TITLE, "title", is_nonblank),
    (Field.TYPE, "type", is_valid_media_type),
    (Field.AUTHOR, "author/director/artist", is_nonblank),
    (Field.DURATION, "duration/pages", is_nonblank),
    (Field.GENRE, "genre", is_nonblank),
    (Field.COMMENT, "comments", is_nonblank),
    (Field.LINK, "link", is_valid_link),
)


class Console:
    """Line-oriented terminal I/O over text streams."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def say(self, text: str) -> None:
        """Write a line of text."""
        self.stdout.write(text + "\n")

    def _prompt(self, prompt: str) -> None:
        self.stdout.write(prompt)
        self.stdout.flush()

    def ask(self, prompt: str) -> Optional[str]:
        """Show the prompt and read one line; None at end of input.

        The line ending is removed and the answer is cut to the size of a
        field.
        """
        self._prompt(prompt)
        line = self.stdin.readline()
        if not line:
            return None
        if line.endswith("\n"):
            line = line[:-1]
        return line[: MAX_STRING - 1]

    def ask_valid(self, prompt: str, validate: Validator) -> str:
        """Ask until the answer passes validation; an empty string at end of input."""
        while True:
            answer = self.ask(prompt)
            if answer is None:
                return ""
            if validate(answer):
                return answer
            self.say("Invalid input, please try again.")

    def ask_int(self, prompt: str) -> Optional[int]:
        """Show the prompt and read a whole number; None if none was given.

        Blank lines are skipped before the number; the rest of its line is
        discarded.
        """
        self._prompt(prompt)
        while True:
            line = self.stdin.readline()
            if not line:
                return None
            if line.strip():
                break
        match = _INT_PATTERN.match(line)
        if match is None:
            return None
        return int(match.group(1))

    def _report(self, message: str, error: OSError) -> None:
        detail = error.strerror or str(error)
        self.stderr.write(f"{message}: {detail}\n")


def _load_limited(path: PathLike) -> List[MediaEntry]:
    return load_entries(path)[:MAX_ENTRIES]


def _list_entries(console: Console, entries: List[MediaEntry]) -> None:
    console.say("\nExisting Entries:")
    for number, entry in enumerate(entries, start=1):
        console.say(f"{number}. {entry.title} [{entry.type}] by {entry.author}")


def _show_entry(console: Console, entry: MediaEntry) -> None:
    console.say(
        f"Title: {entry.title}\n"
        f"Type: {entry.type}\n"
        f"Author: {entry.author}\n"
        f"Duration/Pages: {entry.duration}\n"
        f"Genre: {entry.genre}\n"
        f"Comments: {entry.comment}\n"
        f"Link: {entry.link}"
    )
    console.say(_RULE)


def save_entry(path: PathLike, console: Console) -> Optional[MediaEntry]:
    """Ask for every field of a new entry and append it to the file."""
    try:
        with open(path, "a", encoding="utf-8"):
            pass
    except OSError as error:
        console._report("Failed to open file", error)
        return None

    values = {
        field.value: console.ask_valid(prompt, validate)
        for field, prompt, validate in _SAVE_PROMPTS
    }
    entry = MediaEntry(**values)
    try:
        append_entry(path, entry)
    except OSError as error:
        console._report("Failed to open file", error)
        return None
    console.say("Entry saved successfully!")
    return entry


def edit_entry(path: PathLike, console: Console) -> Optional[MediaEntry]:
    """Let the user pick an entry and change any of its fields."""
    try:
        entries = _load_limited(path)
    except OSError as error:
        console._report("Failed to open file for reading", error)
        return None

    if not entries:
        console.say("No entries found to edit.")
        return None

    _list_entries(console, entries)
    choice = console.ask_int("Enter the entry number to edit (0 to cancel): ")
    if choice is None or not 1 <= choice <= len(entries):
        console.say("Editing cancelled.")
        return None

    entry = entries[choice - 1]
    console.say("Press Enter without typing to keep the current value.")
    for field, label, validate in _EDIT_PROMPTS:
        console.say(f"Current {label}: {entry.value(field)}")
        answer = console.ask(f"Enter new {label}: ")
        if answer is not None and validate(answer):
            setattr(entry, field.value, answer)

    try:
        write_entries(path, entries)
    except OSError as error:
        console._report("Failed to open file for writing", error)
        return None
    console.say("Entry updated successfully!")
    return entry


def read_entries(path: PathLike, console: Console) -> List[MediaEntry]:
    """Search one field of the stored entries and page through the matches.

    Returns the matches that were shown.
    """
    try:
        entries = load_entries(path)
    except OSError as error:
        console._report("Failed to open file", error)
        return []

    console.say("Choose the field to search by:")
    console.say(
        "\n".join(f"{number}. {field.label}" for number, field in enumerate(Field, start=1))
    )
    choice = console.ask_int("Enter your choice (1-7): ")
    if choice is None:
        console.say("Invalid input. Exiting reading mode.")
        return []
    fields = list(Field)
    if not 1 <= choice <= len(fields):
        console.say("Invalid field choice. Exiting.")
        return []

    term = console.ask("Enter the search term: ")
    if term is None:
        console.say("Error reading search term. Exiting.")
        return []

    shown: List[MediaEntry] = []
    for entry in search_entries(entries, fields[choice - 1], term):
        shown.append(entry)
        console.say(f"\nMatch #{len(shown)}:")
        _show_entry(console, entry)
        while True:
            console.say("Choose an action:")
            console.say("1 - Read next matching record")
            console.say("2 - Exit reading mode")
            option = console.ask("Your choice: ")
            if option is None:
                console.say("Error reading input. Exiting reading mode.")
                return shown
            if option == "1":
                break
            if option == "2":
                console.say("Exiting reading mode. Thank you!")
                return shown
            console.say("Invalid input. Please try again.")

    if shown:
        console.say("You've reached the end of the matching entries.")
    else:
        console.say("No matching entries found.")
    return shown


def delete_entry(path: PathLike, console: Console) -> Optional[MediaEntry]:
    """Let the user pick an entry and, once confirmed, remove it from the file."""
    try:
        entries = _load_limited(path)
    except OSError as error:
        console._report("Failed to open file for reading", error)
        return None

    if not entries:
        console.say("No entries found to delete.")
        return None

    _list_entries(console, entries)
    choice = console.ask_int("Enter the entry number to delete (0 to cancel): ")
    if choice is None or not 1 <= choice <= len(entries):
        console.say("Deletion cancelled.")
        return None

    doomed = entries[choice - 1]
    confirm = console.ask(
        f"Are you sure you want to delete '{doomed.title}' by {doomed.author}? (y/n): "
    )
    if not confirm or confirm[0].lower() != "y":
        console.say("Deletion cancelled.")
        return None

    remaining = entries[: choice - 1] + entries[choice:]
    try:
        write_entries(path, remaining)
    except OSError as error:
        console._report("Failed to open file for writing", error)
        return None
    console.say("Entry deleted successfully.")
    return doomed