"""Sort people read from a file by name and write them out again."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Sequence

__all__ = ["BirthDate", "Person", "read_persons", "write_persons", "sort_persons", "main"]


@dataclass(frozen=True)
class BirthDate:
    """A date of birth: year, month name and day."""

    year: int
    month: str
    day: int

    def __str__(self) -> str:
        return f"{self.year} {self.month} {self.day}"


@dataclass(frozen=True)
class Person:
    """A person; people are ordered by name alone."""

    name: str
    surname: str
    birth_date: BirthDate

    def __lt__(self, other: Person) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.name < other.name

    def __str__(self) -> str:
        return f"{self.name} {self.surname} {self.birth_date}"


def _parse_persons(tokens: Sequence[str]) -> Iterator[Person]:
    for offset in range(0, len(tokens) - 4, 5):
        name, surname, year, month, day = tokens[offset:offset + 5]
        try:
            yield Person(name, surname, BirthDate(int(year), month, int(day)))
        except ValueError:
            return


def read_persons(filename: str | Path) -> list[Person]:
    """Read "name surname year month day" records separated by whitespace.

    Reading stops at the first incomplete or malformed record. Raises OSError
    when the file cannot be read.
    """
    try:
        text = Path(filename).read_text()
    except OSError as error:
        raise OSError(f"Cannot open file {filename}") from error
    return list(_parse_persons(text.split()))


def write_persons(filename: str | Path, persons: Iterable[Person]) -> None:
    """Write one person per line; raises OSError when the file cannot be written."""
    try:
        with open(filename, "w") as out:
            for person in persons:
                out.write(f"{person}\n")
    except OSError as error:
        raise OSError(f"Cannot open file {filename}") from error


def sort_persons(persons: Iterable[Person]) -> list[Person]:
    """Return the people sorted by name."""
    return sorted(persons, key=lambda person: person.name)


def main(argv: Sequence[str] | None = None) -> int:
    """Read people from an input file, sort them by name and write them out."""
    args = list(sys.argv[1:] if argv is None else argv)
    input_file = args[0] if args else "input_1e3.txt"
    output_file = args[1] if len(args) > 1 else "output.txt"

    try:
        persons = read_persons(input_file)
        print(f"Sorting {len(persons)} elements...")
        begin = time.process_time()
        ordered = sort_persons(persons)
        duration = time.process_time() - begin
        print(f"Sorting took {duration} seconds")
        write_persons(output_file, ordered)
    except OSError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())