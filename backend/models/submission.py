"""
Submission result models - Outcome of a create-property request
"""
from enum import Enum
from typing import Any, Literal, Optional, Union
from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Why a submission did not create the property"""

    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"


class SubmissionSuccess(BaseModel):
    """The service accepted the property"""

    outcome: Literal["success"] = "success"
    status_code: int = Field(description="HTTP status returned by the service")
    payload: Optional[Any] = Field(default=None, description="Parsed response body, None when empty")


class SubmissionFailure(BaseModel):
    """The request failed before or after reaching the service"""

    outcome: Literal["failure"] = "failure"
    kind: FailureKind
    reason: str
    status_code: Optional[int] = Field(default=None, description="HTTP status when the service answered")


SubmissionResult = Union[SubmissionSuccess, SubmissionFailure]
