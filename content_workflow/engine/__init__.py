"""
Content Workflow Engine — editorial approval state machine.

Ticket: 0001_content_approval_workflow

A content item moves from draft to pending review to published. Reviewers
approve or reject; the body is only visible once published. The state set and
transitions are fixed.
"""

from .models import NEEDED_APPROVALS, Draft, PendingReview, PostState, PostStatus, Published
from .post import ContentItem, create

__all__ = [
    "NEEDED_APPROVALS",
    "ContentItem",
    "Draft",
    "PendingReview",
    "PostState",
    "PostStatus",
    "Published",
    "create",
]
