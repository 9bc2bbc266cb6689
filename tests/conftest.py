"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from csvmarshal import Records


@dataclass
class Person:
    id: int
    name: str

    def header(self) -> list[str]:
        return ["id", "name"]

    def record(self) -> list[str]:
        return [str(self.id), self.name]


@dataclass
class Employee(Person):
    """Same row shape as Person but a distinct concrete type."""


@dataclass
class Report:
    """Implements both capabilities; its own bytes must win."""

    title: str

    def marshal_csv(self) -> bytes:
        return f"# {self.title}\n".encode()

    def header(self) -> list[str]:
        return ["title"]

    def record(self) -> list[str]:
        return [self.title]


class Opaque:
    """Implements neither capability."""


@pytest.fixture
def alice() -> Person:
    return Person(1, "Alice")


@pytest.fixture
def people() -> list[Person]:
    return [Person(1, "Alice"), Person(2, "Bob")]


@pytest.fixture
def people_records(people: list[Person]) -> Records[Person]:
    return Records(Person, people)
