#!/usr/bin/env python3
# Ticket: 0001_content_approval_workflow
"""
Content Workflow State Machine

One pure transition function per trigger. Every function is total: it is
defined for every state, and a trigger that does not apply to the current
state returns that state unchanged instead of raising.

State diagram:
    draft             → pending_review(0)   (request_review)
    pending_review(n) → pending_review(n+1) (approve, n+1 < NEEDED_APPROVALS)
    pending_review(n) → published           (approve, n+1 >= NEEDED_APPROVALS)
    pending_review(n) → draft               (reject, approvals discarded)

Every other (state, trigger) pair is a no-op. Published has no outgoing
transitions.
"""

from collections.abc import Callable

from .models import (
    NEEDED_APPROVALS,
    Draft,
    PendingReview,
    PostState,
    PostStatus,
    Published,
)


# ---------------------------------------------------------------------------
# Error types
# ---------------------------------------------------------------------------


class UnknownTriggerError(ValueError):
    """Raised when fire() is given a trigger name that does not exist."""

    def __init__(self, trigger: str):
        self.trigger = trigger
        super().__init__(
            f"Unknown trigger: '{trigger}'. "
            f"Valid triggers: {sorted(TRIGGERS)}"
        )


class UnknownStatusError(ValueError):
    """Raised when an unknown post status is encountered."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(
            f"Unknown post status: '{status}'. "
            f"Valid statuses: {sorted(PostStatus.ALL)}"
        )


# ---------------------------------------------------------------------------
# Transition functions
# ---------------------------------------------------------------------------


def request_review(state: PostState) -> PostState:
    """Submit a draft for review. Pending and published items are unchanged."""
    if isinstance(state, Draft):
        return PendingReview(approvals=0)
    return state


def approve(state: PostState) -> PostState:
    """
    Record one approval on a pending item.

    The approval that brings the count to NEEDED_APPROVALS publishes the item.
    Drafts that were never submitted and published items are unchanged.
    """
    if isinstance(state, PendingReview):
        approvals = state.approvals + 1
        if approvals < NEEDED_APPROVALS:
            return PendingReview(approvals=approvals)
        return Published()
    return state


def reject(state: PostState) -> PostState:
    """Send a pending item back to draft, discarding its approvals."""
    if isinstance(state, PendingReview):
        return Draft()
    return state


TRIGGERS: dict[str, Callable[[PostState], PostState]] = {
    "request_review": request_review,
    "approve": approve,
    "reject": reject,
}


def fire(state: PostState, trigger: str) -> PostState:
    """
    Apply the named trigger to state and return the resulting state.

    Raises:
        UnknownTriggerError: if trigger is not a key of TRIGGERS
    """
    try:
        transition = TRIGGERS[trigger]
    except KeyError:
        raise UnknownTriggerError(trigger) from None
    return transition(state)


# ---------------------------------------------------------------------------
# State predicates
# ---------------------------------------------------------------------------


def is_terminal(state: PostState) -> bool:
    """Return True if no trigger can change state."""
    return state.status in PostStatus.TERMINAL


def is_editable(state: PostState) -> bool:
    """Return True if text may be appended to the body."""
    return isinstance(state, Draft)


def is_visible(state: PostState) -> bool:
    """Return True if the body is exposed to readers."""
    return isinstance(state, Published)


def available_transitions(state: PostState) -> frozenset[str]:
    """Return the names of the triggers that would change state."""
    return frozenset(
        name for name, transition in TRIGGERS.items()
        if transition(state) != state
    )


def state_from_status(status: str, approvals: int | None = None) -> PostState:
    """
    Rebuild a state variant from its status string.

    approvals is only read for pending_review, where it defaults to 0.

    Raises:
        UnknownStatusError: if status is not in PostStatus.ALL
        ValueError: if approvals is out of range for pending_review
    """
    if status == PostStatus.DRAFT:
        return Draft()
    if status == PostStatus.PENDING_REVIEW:
        return PendingReview(approvals=approvals or 0)
    if status == PostStatus.PUBLISHED:
        return Published()
    raise UnknownStatusError(status)
