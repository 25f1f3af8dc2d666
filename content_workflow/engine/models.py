#!/usr/bin/env python3
# Ticket: 0001_content_approval_workflow
"""
Content Workflow Data Models

Immutable value objects for the editorial states a content item moves through.
The state set is closed: Draft, PendingReview and Published. Each variant is a
frozen dataclass tagged with a PostStatus string, and only PendingReview carries
data (its approval counter).

The body text is not part of any state. It is owned by the ContentItem alone.
"""

from dataclasses import dataclass
from typing import ClassVar


# Number of approvals a submitted item needs before it is published.
NEEDED_APPROVALS = 2


# ---------------------------------------------------------------------------
# Status constants
# ---------------------------------------------------------------------------

class PostStatus:
    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    PUBLISHED = "published"

    ALL = frozenset([DRAFT, PENDING_REVIEW, PUBLISHED])

    # Every trigger is a no-op once published
    TERMINAL = frozenset([PUBLISHED])


# ---------------------------------------------------------------------------
# State variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Draft:
    """Editable, unreviewed content."""
    status: ClassVar[str] = PostStatus.DRAFT

    def to_dict(self) -> dict:
        return {"status": self.status}


@dataclass(frozen=True)
class PendingReview:
    """Submitted content waiting for approvals."""
    status: ClassVar[str] = PostStatus.PENDING_REVIEW
    approvals: int = 0

    def __post_init__(self):
        if not 0 <= self.approvals < NEEDED_APPROVALS:
            raise ValueError(
                f"PendingReview approvals must be in 0..{NEEDED_APPROVALS - 1}, "
                f"got {self.approvals}"
            )

    def to_dict(self) -> dict:
        return {"status": self.status, "approvals": self.approvals}


@dataclass(frozen=True)
class Published:
    """Finalized content; the body is visible."""
    status: ClassVar[str] = PostStatus.PUBLISHED

    def to_dict(self) -> dict:
        return {"status": self.status}


PostState = Draft | PendingReview | Published


# ---------------------------------------------------------------------------
# Runtime configuration (from .workflow/config.yaml)
# ---------------------------------------------------------------------------


@dataclass
class WorkflowConfig:
    """Runtime configuration loaded from .workflow/config.yaml."""
    clear_body_on_reject: bool = False
    source_path: str | None = None      # file the values came from, if any
