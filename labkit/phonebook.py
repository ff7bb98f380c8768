"""Names, phone numbers and a phone book that can be read, checked and sorted."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import TextIO


class Name:
    """A name that is normalised to an initial capital and lower case rest."""

    __slots__ = ("_text",)

    def __init__(self, text: str = "") -> None:
        self._text = str(text)
        self.normalize()

    @classmethod
    def _raw(cls, text: str) -> Name:
        name = cls.__new__(cls)
        name._text = text
        return name

    def normalize(self) -> None:
        if self._text:
            self._text = self._text[0].upper() + self._text[1:].lower()

    def __gt__(self, other: Name) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._text > other._text

    def __lt__(self, other: Name) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._text < other._text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Name({self._text!r})"


@dataclass(frozen=True)
class PhoneNumber:
    """A phone number as written."""

    nr: str = ""

    def iswellformed(self) -> bool:
        """True if the number is '+' followed by 10 to 20 digits."""
        if not self.nr.startswith("+"):
            return False
        digits = self.nr[1:]
        return all(c in "0123456789" for c in digits) and 10 <= len(digits) <= 20

    def __str__(self) -> str:
        return self.nr


@dataclass
class PhoneEntry:
    """One line of a phone book: first name, second name, number."""

    firstname: Name = field(default_factory=Name)
    secondname: Name = field(default_factory=Name)
    number: PhoneNumber = field(default_factory=PhoneNumber)

    def __post_init__(self) -> None:
        if isinstance(self.firstname, str):
            self.firstname = Name(self.firstname)
        if isinstance(self.secondname, str):
            self.secondname = Name(self.secondname)
        if isinstance(self.number, str):
            self.number = PhoneNumber(self.number)

    @classmethod
    def parse(cls, line: str) -> PhoneEntry:
        """Build an entry from three whitespace-separated words, as read."""
        words = line.split()
        if len(words) != 3:
            raise ValueError(f"expected three fields, got {len(words)}: {line!r}")
        first, second, number = words
        return cls(Name._raw(first), Name._raw(second), PhoneNumber(number))

    def __str__(self) -> str:
        return f"{self.firstname} {self.secondname} {self.number}"


@dataclass
class PhoneBook:
    """An ordered collection of phone entries."""

    entries: list[PhoneEntry] = field(default_factory=list)

    def insert(self, entry: PhoneEntry) -> None:
        self.entries.append(entry)

    def read(self, stream: TextIO) -> None:
        """Append entries made of each three consecutive words in stream.

        A trailing group of fewer than three words is ignored.
        """
        words = stream.read().split()
        for start in range(0, len(words) - len(words) % 3, 3):
            self.insert(PhoneEntry.parse(" ".join(words[start:start + 3])))

    def checkandnormalize(self, err: TextIO) -> None:
        """Normalise all names; report malformed numbers to err."""
        for entry in self.entries:
            entry.firstname.normalize()
            entry.secondname.normalize()
            if not entry.number.iswellformed():
                err.write(f"phone number is not well-formed: {entry.number}\n")

    def sort_by_secondname(self) -> None:
        self.entries.sort(key=lambda e: str(e.secondname))

    def __str__(self) -> str:
        return "".join(f"{entry}\n" for entry in self.entries)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read, check and sort a phone book."
    )
    parser.add_argument("book", nargs="?", default="phonebook.txt")
    parser.add_argument("sorted", nargs="?", default="sorted.txt")
    args = parser.parse_args(argv)

    try:
        with open(args.book, encoding="utf-8") as f:
            book = PhoneBook()
            book.read(f)
    except OSError:
        print("could not open the phonebook")
        return 1

    print(book)
    book.checkandnormalize(sys.stderr)
    print(book)
    book.sort_by_secondname()
    print(book)

    try:
        with open(args.sorted, "w", encoding="utf-8") as out:
            out.write(str(book))
    except OSError:
        print("could not open outputfile")
        return 1
    return 0