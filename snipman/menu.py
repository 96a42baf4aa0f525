import enum
import sys
from typing import Optional, TextIO

from .snippet import ItemNotFoundError, Snippet


class Menu(enum.Enum):
    CREATE = "C"
    RETRIEVE = "R"
    UPDATE = "U"
    DELETE = "D"
    EXIT = "E"

    @classmethod
    def from_choice(cls, choice: str) -> Optional["Menu"]:
        try:
            return cls(choice.strip().upper())
        except ValueError:
            return None


MENU_TEXT = """Menu:
C - Create
R - Retrieve
U - Update
D - Delete
E - Exit"""

INVALID_CHOICE = "Invalid Choice. Please enter C, R, U, D, or E."


def get_user_input(stdin: TextIO) -> Optional[str]:
    """Read one line, trimmed. None at end of input."""
    line = stdin.readline()
    if not line:
        return None
    return line.strip()


def _ask(prompt: str, stdin: TextIO, stdout: TextIO) -> Optional[str]:
    stdout.write(prompt)
    stdout.flush()
    return get_user_input(stdin)


def handle_menu_choice(choice: Menu, snippet: Snippet, stdin: TextIO, stdout: TextIO) -> None:
    # a command cut short by end of input changes nothing
    if choice == Menu.CREATE:
        new_key = _ask("Enter the new key: ", stdin, stdout)
        if new_key is None:
            return
        new_value = _ask("Enter the new value for that key: ", stdin, stdout)
        if new_value is None:
            return
        previous = snippet.create(new_key, new_value)
        print(f"Created: {previous!r}", file=stdout)

    elif choice == Menu.RETRIEVE:
        key = _ask("Enter the desired key: ", stdin, stdout)
        if key is None:
            return
        print(f"Retrieved: {snippet.retrieve(key)!r}", file=stdout)

    elif choice == Menu.UPDATE:
        key = _ask("Enter the desired key to update: ", stdin, stdout)
        if key is None:
            return
        updated_value = _ask("Enter the desired new value: ", stdin, stdout)
        if updated_value is None:
            return
        try:
            snippet.update(key, updated_value)
        except ItemNotFoundError as e:
            print(e, file=stdout)
        else:
            print(f"Updated: {key!r}", file=stdout)

    elif choice == Menu.DELETE:
        key = _ask("Enter the desired key to delete: ", stdin, stdout)
        if key is None:
            return
        print(f"Deleted: {snippet.delete(key)!r}", file=stdout)

    elif choice == Menu.EXIT:
        print("Exiting the program.", file=stdout)


def run(snippet: Snippet, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    while True:
        print(MENU_TEXT, file=stdout)
        stdout.write("Enter your choice: ")
        stdout.flush()

        raw_choice = get_user_input(stdin)
        # end of input behaves like "E"
        choice = Menu.EXIT if raw_choice is None else Menu.from_choice(raw_choice)

        if choice is None:
            print(INVALID_CHOICE, file=stdout)
            continue

        handle_menu_choice(choice, snippet, stdin, stdout)
        if choice == Menu.EXIT:
            return
