"""
Call sites for Option, each monadic chain is paired with the explicit checks it
replaces.
"""
import dataclasses
import math
import operator

from optional_explanation.option import EMPTY
from optional_explanation.option import Option


def safe_square_root(value: float) -> Option[float]:
    """Square root of value, or an empty Option for negative input."""
    if value < 0:
        return Option()
    return Option(math.sqrt(value))


def get_default() -> float:
    return 0.0


@dataclasses.dataclass(frozen=True)
class Person:
    first_name: str
    middle_name: Option[str]
    last_name: str

    def get_middle_name(self) -> Option[str]:
        return self.middle_name


def maybe_load_from_file() -> Option[Person]:
    """Load a Person. Absence here is an expected outcome, not an error."""
    return Option(Person("John", Option(), "Doe"))


def evaluate_imperatively(start: Option[float]) -> Option[float]:
    if start == EMPTY:
        return Option()

    negated = -(start.value() + 3)
    root = safe_square_root(negated)
    if root == EMPTY:
        return Option()

    return Option(root.value() * 2)


def evaluate_chain(start: Option[float]) -> Option[float]:
    return (
        start.map(lambda value: value + 3)
        .map(operator.neg)
        .flat_map(safe_square_root)
        .map(lambda value: value * 2)
    )


def capitalize_middle_name_imperatively(person: Option[Person]) -> Option[str]:
    if person == EMPTY:
        return Option()

    middle_name = person.value().get_middle_name()
    if middle_name == EMPTY:
        return Option()

    capitalized = ""
    for char in middle_name.value():
        capitalized += char.upper()
    return Option(capitalized)


def capitalize_middle_name(person: Option[Person]) -> Option[str]:
    return person.flat_map(Person.get_middle_name).map(str.upper)


def add_options_imperatively(a: Option[int], b: Option[int]) -> Option[int]:
    if a != EMPTY and b != EMPTY:
        return Option(a.value() + b.value())
    return Option()


def add_options(a: Option[int], b: Option[int]) -> Option[int]:
    # each optional adds a level of nesting, and a stack frame when called
    return a.flat_map(lambda x: b.map(lambda y: x + y))
