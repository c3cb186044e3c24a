"""
Form state model - Lifecycle of the add property form
"""
from enum import Enum


class FormState(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    DONE = "done"
    ERROR = "error"
