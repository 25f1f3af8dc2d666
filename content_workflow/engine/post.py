#!/usr/bin/env python3
# Ticket: 0001_content_approval_workflow
"""
Content Item

A ContentItem owns a text body and exactly one workflow state. The body grows
only by appending, and only while the item is a draft. Readers see the body
through visible_content(), which is empty until the item is published.

No operation here raises for an inapplicable trigger or edit; those calls are
no-ops. A transition reads the state and replaces it whole, so callers sharing
an item between threads must hold their own lock around each call.
"""

import logging
from typing import Any

from . import state_machine
from .models import Draft, PendingReview, PostState, WorkflowConfig

logger = logging.getLogger(__name__)


class ContentItem:
    """A piece of text content under editorial workflow control."""

    def __init__(self, config: WorkflowConfig | None = None):
        self._config = config or WorkflowConfig()
        self._body = ""
        self._state: PostState = Draft()

    def __repr__(self) -> str:
        return f"ContentItem(state={self._state!r}, body_length={len(self._body)})"

    # -- Read access -------------------------------------------------------

    @property
    def state(self) -> PostState:
        return self._state

    @property
    def status(self) -> str:
        return self._state.status

    @property
    def body(self) -> str:
        """The full body, regardless of state. Use visible_content() for readers."""
        return self._body

    @property
    def approvals(self) -> int | None:
        """Approval count while pending review, otherwise None."""
        if isinstance(self._state, PendingReview):
            return self._state.approvals
        return None

    @property
    def is_published(self) -> bool:
        return state_machine.is_visible(self._state)

    def visible_content(self) -> str:
        """Return the body if published, else an empty string."""
        if state_machine.is_visible(self._state):
            return self._body
        return ""

    # -- Editing -----------------------------------------------------------

    def append_text(self, text: str) -> None:
        """Append text to the body. Ignored unless the item is a draft."""
        if not state_machine.is_editable(self._state):
            logger.debug("Ignoring edit on %s content item", self._state.status)
            return
        self._body += text

    # -- Transitions -------------------------------------------------------

    def request_review(self) -> None:
        self._apply("request_review")

    def approve(self) -> None:
        self._apply("approve")

    def reject(self) -> None:
        rejected = isinstance(self._state, PendingReview)
        self._apply("reject")
        if rejected and self._config.clear_body_on_reject:
            self._body = ""

    def _apply(self, trigger: str) -> None:
        old_state = self._state
        self._state = state_machine.fire(old_state, trigger)
        if self._state == old_state:
            logger.debug("Trigger '%s' ignored in state %r", trigger, old_state)
        else:
            logger.info(
                "Content item transitioned on '%s': %r → %r",
                trigger, old_state, self._state,
            )

    # -- Snapshots ---------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-dict snapshot of body and state."""
        return {"body": self._body, **self._state.to_dict()}

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        config: WorkflowConfig | None = None,
    ) -> "ContentItem":
        """
        Construct from a snapshot produced by to_dict().

        Raises:
            UnknownStatusError: if data["status"] is not a known status
            ValueError: if the approval count is out of range
        """
        item = cls(config)
        item._body = data.get("body") or ""
        item._state = state_machine.state_from_status(
            data.get("status", Draft.status), data.get("approvals"),
        )
        return item


def create(config: WorkflowConfig | None = None) -> ContentItem:
    """Return a new, empty draft."""
    return ContentItem(config)
