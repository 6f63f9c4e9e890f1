from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic
from typing import TypeVar


T = TypeVar("T")
U = TypeVar("U")


class IllegalAccessError(ValueError):
    """Raised when reading the value of an empty Option."""


class Empty:
    """The empty sentinel, compare an Option against EMPTY to test for absence.

    There is only ever one instance, `Empty()` always returns `EMPTY`."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


EMPTY = Empty()


@dataclass(frozen=True, eq=False)
class Option(Generic[T]):
    """A value of type T, or the deliberate absence of one.

    Option(42) holds 42, Option() and Option(EMPTY) hold nothing. None is a
    value like any other, use Option.from_nullable() to treat it as absence.

    Chaining flat_map recurses through the supplied callables, so very deep
    nesting grows the call stack."""

    # inner value of this option, never access it directly, instead using Option.value() or Option.value_or()
    _value: T | Empty = EMPTY

    @classmethod
    def from_nullable(cls, value: T | None) -> "Option[T]":
        """Build an Option, treating None as absence."""
        if value is None:
            return cls()
        return cls(value)

    def __repr__(self) -> str:
        if self.has_value():
            return "Option::Some({!r})".format(self._value)
        return "Option::None"

    def __eq__(self, other) -> bool:
        if other is EMPTY:
            return not self.has_value()

        if not isinstance(other, Option):
            return NotImplemented

        # empty options are all alike, populated ones defer to their values
        if self.has_value() and other.has_value():
            return self._value == other._value
        return self.has_value() == other.has_value()

    def __hash__(self) -> int:
        # an empty option hashes like EMPTY, which it also compares equal to
        return hash(self._value)

    def __bool__(self) -> bool:
        return self.has_value()

    def has_value(self) -> bool:
        """Check if the Option contains a value or not."""
        return self._value is not EMPTY

    def value(self) -> T:
        """Attempt to get value, raises IllegalAccessError if missing."""
        if not self.has_value():
            msg = "Option did not contain a value. Use Option.has_value() before attempting Option.value()."
            raise IllegalAccessError(msg)
        return self._value

    def value_or(self, default: T) -> T:
        """Get the value, or the provided default.

        The default is evaluated by the caller whether it's used or not, see
        Option.value_or_eval() for an expensive fallback."""
        if self.has_value():
            return self._value
        return default

    def value_or_eval(self, fn: Callable[[], T]) -> T:
        """Get the value, or call fn() and return its result.

        fn is only called when the Option is empty."""
        if self.has_value():
            return self._value
        return fn()

    def map(self, fn: Callable[[T], U]) -> "Option[U]":
        """Map Option[T] to Option[U] via the provided callable.

        This is eagerly evaluated and immediately applies the mapping. fn
        should not fail, if it can then use Option.flat_map() instead."""
        if not self.has_value():
            return self.__class__()
        return self.__class__(fn(self._value))

    def flat_map(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        """Bind Option[T] to the Option[U] returned by fn.

        The result of fn is returned as is, so a chain of flat_map calls stops
        at the first empty Option without calling the rest."""
        if not self.has_value():
            return self.__class__()
        return fn(self._value)

    def or_else(self, fn: Callable[[], "Option[T]"]) -> "Option[T]":
        """Return this Option if it holds a value, otherwise the one built by fn()."""
        if self.has_value():
            return self
        return fn()
