"""
Tests for engine/models.py

Validates:
- Each state variant carries the right status tag
- PendingReview enforces its approval range
- Variants are immutable, hashable values
"""

import dataclasses

import pytest

from content_workflow.engine.models import (
    NEEDED_APPROVALS,
    Draft,
    PendingReview,
    PostStatus,
    Published,
)


def test_needed_approvals_is_two():
    assert NEEDED_APPROVALS == 2


def test_status_tags():
    assert Draft().status == PostStatus.DRAFT
    assert PendingReview().status == PostStatus.PENDING_REVIEW
    assert Published().status == PostStatus.PUBLISHED


def test_all_statuses():
    assert PostStatus.ALL == {"draft", "pending_review", "published"}
    assert PostStatus.TERMINAL == {"published"}


def test_pending_review_defaults_to_zero():
    assert PendingReview().approvals == 0


@pytest.mark.parametrize("approvals", [-1, NEEDED_APPROVALS, NEEDED_APPROVALS + 5])
def test_pending_review_rejects_out_of_range(approvals):
    with pytest.raises(ValueError):
        PendingReview(approvals)


def test_variants_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        PendingReview(0).approvals = 1


def test_variants_compare_by_value():
    assert Draft() == Draft()
    assert PendingReview(1) == PendingReview(1)
    assert PendingReview(0) != PendingReview(1)
    assert Draft() != Published()
    assert len({Draft(), Draft(), Published()}) == 2


def test_to_dict():
    assert Draft().to_dict() == {"status": "draft"}
    assert PendingReview(1).to_dict() == {"status": "pending_review", "approvals": 1}
    assert Published().to_dict() == {"status": "published"}
