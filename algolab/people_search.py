"""Look up people by surname: build a dictionary from a file and search keys in it."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Sequence

__all__ = ["Person", "read_persons", "read_keys", "build_dictionary", "search", "main"]


@dataclass(frozen=True)
class Person:
    """A person with a name, a surname and an age; the surname is the key."""

    name: str
    surname: str
    age: int

    @property
    def key(self) -> str:
        """The key the person is filed under."""
        return self.surname

    def __str__(self) -> str:
        return f"{self.name} {self.surname} {self.age}"


def _read_tokens(filename: str | Path) -> list[str]:
    try:
        text = Path(filename).read_text()
    except OSError as error:
        raise OSError(f"Cannot open file {filename}") from error
    return text.split()


def _parse_persons(tokens: Sequence[str]) -> Iterator[Person]:
    for offset in range(0, len(tokens) - 2, 3):
        name, surname, age = tokens[offset:offset + 3]
        try:
            yield Person(name, surname, int(age))
        except ValueError:
            return


def read_persons(filename: str | Path) -> list[Person]:
    """Read people as whitespace-separated "name surname age" records.

    Reading stops at the first incomplete or malformed record. Raises OSError
    when the file cannot be read.
    """
    return list(_parse_persons(_read_tokens(filename)))


def read_keys(filename: str | Path) -> list[str]:
    """Read whitespace-separated keys; raises OSError when the file cannot be read."""
    return _read_tokens(filename)


def build_dictionary(persons: Iterable[Person]) -> dict[str, Person]:
    """File every person under their key; the first person with a key is kept."""
    dictionary: dict[str, Person] = {}
    for person in persons:
        dictionary.setdefault(person.key, person)
    return dictionary


def search(dictionary: Mapping[str, Person], keys: Iterable[str]) -> int:
    """Return how many of the keys are found in the dictionary."""
    return sum(1 for key in keys if key in dictionary)


def main(argv: Sequence[str] | None = None) -> int:
    """Build a dictionary from an input file and time searching for keys in it."""
    args = list(sys.argv[1:] if argv is None else argv)
    input_file = args[0] if args else "input_1e3.txt"
    keys_file = args[1] if len(args) > 1 else "keys.txt"

    try:
        persons = read_persons(input_file)
        print(f"Adding {len(persons)} elements in the dictionary...")
        begin = time.process_time()
        dictionary = build_dictionary(persons)
        duration = time.process_time() - begin
        print(f"Building the dictionary took {duration} seconds")

        keys = read_keys(keys_file)
        print(f"Searching {len(keys)} keys in the dictionary...")
        begin = time.process_time()
        found = search(dictionary, keys)
        duration = time.process_time() - begin
        print(f"Searching took {duration} seconds, keys found: {found}")
    except OSError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())