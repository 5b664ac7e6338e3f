"""Sample record types used by the ``demo`` command and the default registry."""

from __future__ import annotations

from dataclasses import dataclass

from loadtok.domain.record import record
from loadtok.domain.scalars import INT, TEXT
from loadtok.domain.sequence import sequence_of


@dataclass(frozen=True)
class Employee:
    name: str
    age: int

    def __str__(self) -> str:
        return f"(name={self.name}, age={self.age})"


@dataclass(frozen=True)
class Company:
    name: str
    employees: list[Employee]

    def __str__(self) -> str:
        employees = ", ".join(str(e) for e in self.employees)
        return f"(name={self.name}, employees=[{employees}])"


EMPLOYEE = record(Employee, name=TEXT, age=INT)
COMPANY = record(Company, name=TEXT, employees=sequence_of(EMPLOYEE))

# (label, input, type expression) triples shown by ``loadtok demo``.
DEMO_SCENARIOS: tuple[tuple[str, str, str], ...] = (
    ("integer", "33", "int"),
    ("text", "abc", "str"),
    ("list of text", "3/apple/banana/cherry", "list[str]"),
    ("employee", "taro/3", "Employee"),
    ("company", "CatWorld/3/tama/5/mike/6/kuro/7", "Company"),
)
