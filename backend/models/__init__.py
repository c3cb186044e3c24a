"""
Models for the add property form workflow
"""

from .property_draft import PropertyDraft, FIELD_LABELS, UnknownFieldError
from .submission import FailureKind, SubmissionSuccess, SubmissionFailure, SubmissionResult
from .form_state import FormState

__all__ = [
    "PropertyDraft",
    "FIELD_LABELS",
    "UnknownFieldError",
    "FailureKind",
    "SubmissionSuccess",
    "SubmissionFailure",
    "SubmissionResult",
    "FormState",
]
