"""Membership diffing for unordered multi-valued fields.

Incremental APIs (roles) take add/remove lists and go through
``diff_membership``. Replace-style APIs (groups) send the whole desired set
via ``replace_membership`` and skip diffing.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from reconcile_core.tristate import OMIT, TriState, _OmitType

MembershipSet = frozenset[str]


@dataclass(frozen=True)
class MembershipDiff:
    """Add/remove lists that move ``current`` to the desired set."""

    additions: frozenset[str] = frozenset()
    removals: frozenset[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        return not self.additions and not self.removals

    def apply(self, current: Iterable[str]) -> frozenset[str]:
        """Add then remove; yields the desired set for a known target."""
        return (normalize_members(current) | self.additions) - self.removals

    def sorted_additions(self) -> list[str]:
        return sorted(self.additions)

    def sorted_removals(self) -> list[str]:
        return sorted(self.removals)


def normalize_members(values: Iterable[str | None] | None) -> frozenset[str]:
    """Deduplicate identifiers and drop ``None`` elements of partial lists."""
    if values is None:
        return frozenset()
    return frozenset(v for v in values if v is not None)


def diff_membership(
    current: Iterable[str] | None,
    desired: TriState[Iterable[str]],
) -> MembershipDiff:
    """Compute additions and removals between stored and desired membership.

    Unknown desired leaves membership untouched. Null desired removes every
    current member.
    """
    if desired.is_unknown:
        return MembershipDiff()

    current_set = normalize_members(current)
    if desired.is_null:
        return MembershipDiff(removals=current_set)

    desired_set = normalize_members(desired.value)
    return MembershipDiff(
        additions=desired_set - current_set,
        removals=current_set - desired_set,
    )


def replace_membership(desired: TriState[Iterable[str]]) -> list[str] | _OmitType:
    """Full-list payload entry for replace-style membership APIs."""
    if desired.is_unknown:
        return OMIT
    if desired.is_null:
        return []
    return sorted(normalize_members(desired.value))


def membership_on_read(
    server_values: Iterable[str] | None,
    prior: TriState[frozenset[str]],
) -> TriState[frozenset[str]]:
    """Lift a server membership list into state.

    A field the server did not echo keeps the prior value; an empty list is
    null.
    """
    if server_values is None:
        return prior
    members = normalize_members(server_values)
    if not members:
        return TriState.null()
    return TriState.known(members)
