"""Reconcile Core - tri-state values and the reconcilers built on them."""

from reconcile_core.config import ReconcileConfig, load_config
from reconcile_core.errors import (
    AmbiguousError,
    ConflictingInputError,
    ErrorKind,
    NotFoundError,
    ReconcileError,
    ValidationError,
)
from reconcile_core.log import configure_logging
from reconcile_core.reconcile import (
    MembershipDiff,
    build_composite_payload,
    build_payload,
    diff_membership,
    reconcile_after_write,
    reconcile_changed,
    reconcile_scalar,
    reconcile_scalar_on_read,
    replace_membership,
)
from reconcile_core.selector import select_unique
from reconcile_core.tristate import OMIT, TriState, ValueState

__version__ = "0.1.0"

__all__ = [
    "OMIT",
    "AmbiguousError",
    "ConflictingInputError",
    "ErrorKind",
    "MembershipDiff",
    "NotFoundError",
    "ReconcileConfig",
    "ReconcileError",
    "TriState",
    "ValidationError",
    "ValueState",
    "build_composite_payload",
    "build_payload",
    "configure_logging",
    "diff_membership",
    "load_config",
    "reconcile_after_write",
    "reconcile_changed",
    "reconcile_scalar",
    "reconcile_scalar_on_read",
    "replace_membership",
    "select_unique",
]
