"""Scalar, membership and composite reconcilers."""

from reconcile_core.reconcile.composite import (
    build_composite_payload,
    composite_on_read,
    reconcile_after_write,
)
from reconcile_core.reconcile.membership import (
    MembershipDiff,
    MembershipSet,
    diff_membership,
    membership_on_read,
    normalize_members,
    replace_membership,
)
from reconcile_core.reconcile.scalar import (
    build_payload,
    reconcile_changed,
    reconcile_scalar,
    reconcile_scalar_on_read,
)

__all__ = [
    "MembershipDiff",
    "MembershipSet",
    "build_composite_payload",
    "build_payload",
    "composite_on_read",
    "diff_membership",
    "membership_on_read",
    "normalize_members",
    "reconcile_after_write",
    "reconcile_changed",
    "reconcile_scalar",
    "reconcile_scalar_on_read",
    "replace_membership",
]
