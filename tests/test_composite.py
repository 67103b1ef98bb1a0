"""Tests for composite (all-or-nothing) field reconciliation."""

from __future__ import annotations

import logging

import pytest

from reconcile_core.reconcile import (
    build_composite_payload,
    composite_on_read,
    reconcile_after_write,
)
from reconcile_core.tristate import OMIT, TriState
from reconcile_braintrust.client.models import RepoInfo


@pytest.fixture()
def old_info():
    return RepoInfo(commit="old", branch="main")


@pytest.fixture()
def new_info():
    return RepoInfo(commit="new", branch="feature")


# -- Payload ------------------------------------------------------------------


def test_payload_known_is_whole_object(new_info):
    assert build_composite_payload(TriState.known(new_info)) == {
        "commit": "new",
        "branch": "feature",
    }


def test_payload_null_and_unknown_omitted():
    assert build_composite_payload(TriState.null()) is OMIT
    assert build_composite_payload(TriState.unknown()) is OMIT


# -- Preserve on absence ------------------------------------------------------


class TestPreserveOnAbsence:
    def test_absent_from_config_keeps_prior_even_if_echoed(self, old_info, new_info):
        prior = TriState.known(old_info)
        result = reconcile_after_write(
            in_config=False, submitted=TriState.null(), echoed=new_info, prior=prior
        )
        assert result is prior

    def test_absent_from_config_keeps_prior_on_empty_echo(self, old_info):
        prior = TriState.known(old_info)
        result = reconcile_after_write(
            in_config=False, submitted=TriState.null(), echoed=None, prior=prior
        )
        assert result == prior

    def test_unknown_submission_without_echo_keeps_prior(self, old_info, caplog):
        prior = TriState.known(old_info)
        with caplog.at_level(logging.DEBUG, logger="reconcile_core.reconcile.composite"):
            result = reconcile_after_write(
                in_config=True, submitted=TriState.unknown(), echoed=None, prior=prior
            )
        assert result == prior
        assert "keeping prior state" in caplog.text


# -- Adoption -----------------------------------------------------------------


def test_server_echo_adopted(old_info, new_info):
    result = reconcile_after_write(
        in_config=True,
        submitted=TriState.known(new_info),
        echoed=new_info,
        prior=TriState.known(old_info),
    )
    assert result == TriState.known(new_info)


def test_known_submission_without_echo_becomes_null(old_info, new_info):
    result = reconcile_after_write(
        in_config=True,
        submitted=TriState.known(new_info),
        echoed=None,
        prior=TriState.known(old_info),
    )
    assert result.is_null


def test_composite_on_read():
    assert composite_on_read(None).is_null
    info = RepoInfo(commit="c")
    assert composite_on_read(info) == TriState.known(info)
