"""Tri-state values: known, explicitly null, or not yet resolved.

The form layer hands every attribute over as one of three states:

* ``known`` carries a concrete value.
* ``null`` means the attribute is explicitly absent.
* ``unknown`` means the value will only be computed during apply.

``null`` and ``unknown`` must never collapse into a single "absent" marker;
payload builders send a clear for the first and omit the field for the
second. The ``OMIT`` sentinel below is how a reconciler says "leave this
field out of the request".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ValueState(str, Enum):
    """Tag of a tri-state value."""

    known = "known"
    null = "null"
    unknown = "unknown"


def _get_omit() -> "_OmitType":
    # pickle factory that returns the singleton
    return OMIT


@dataclass(frozen=True)
class _OmitType:
    """Sentinel for a payload field that must not be sent at all.

    Distinct from ``None`` and from any clear value such as ``{}``.
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "OMIT"

    def __reduce__(self):
        return (_get_omit, ())


OMIT = _OmitType()


@dataclass(frozen=True)
class TriState(Generic[T]):
    """A value in exactly one of the states known, null or unknown."""

    state: ValueState
    _value: Any = None

    def __post_init__(self) -> None:
        if self.state is ValueState.known and self._value is None:
            raise ValueError("known tri-state value requires a concrete value")
        if self.state is not ValueState.known and self._value is not None:
            raise ValueError(f"{self.state.value} tri-state value cannot carry a value")

    # -- Constructors ---------------------------------------------------------

    @classmethod
    def known(cls, value: T) -> TriState[T]:
        return cls(ValueState.known, value)

    @classmethod
    def null(cls) -> TriState[T]:
        return cls(ValueState.null)

    @classmethod
    def unknown(cls) -> TriState[T]:
        return cls(ValueState.unknown)

    @classmethod
    def from_optional(cls, value: T | None) -> TriState[T]:
        """Lift a plain optional value: ``None`` becomes null."""
        if value is None:
            return cls.null()
        return cls.known(value)

    # -- Accessors ------------------------------------------------------------

    @property
    def is_known(self) -> bool:
        return self.state is ValueState.known

    @property
    def is_null(self) -> bool:
        return self.state is ValueState.null

    @property
    def is_unknown(self) -> bool:
        return self.state is ValueState.unknown

    @property
    def value(self) -> T:
        if self.state is not ValueState.known:
            raise ValueError(f"cannot read value of a {self.state.value} tri-state")
        return self._value

    def value_or(self, default: T) -> T:
        return self._value if self.state is ValueState.known else default

    def __repr__(self) -> str:
        if self.state is ValueState.known:
            return f"TriState.known({self._value!r})"
        return f"TriState.{self.state.value}()"


def known_string(value: TriState[str]) -> str | None:
    """Return the string if it is known and non-empty, else ``None``."""
    if value.is_known and value.value != "":
        return value.value
    return None
