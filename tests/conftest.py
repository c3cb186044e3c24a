import asyncio

import pytest

from config.settings import ClientConfig
from models.submission import SubmissionFailure, SubmissionSuccess, FailureKind

API_BASE_URL = "http://localhost:5001"
PROPERTIES_URL = f"{API_BASE_URL}/properties"

EXAMPLE_BODY = {
    "title": "Example title",
    "askingPrice": "$100",
    "description": "Example description",
    "address": "123 Example Address",
    "img": "http://example-image.jpg",
}


class FakeSubmissionClient:
    """Records every draft it receives and answers with queued results"""

    def __init__(self, *results, gate: asyncio.Event = None, on_call=None):
        self.results = list(results) or [SubmissionSuccess(status_code=201)]
        self.gate = gate
        self.on_call = on_call
        self.drafts = []

    async def create_property(self, draft):
        self.drafts.append(draft.to_payload())
        if self.on_call is not None:
            self.on_call(draft)
        if self.gate is not None:
            await self.gate.wait()
        return self.results.pop(0) if len(self.results) > 1 else self.results[0]


@pytest.fixture
def client_config():
    return ClientConfig(apiBaseUrl=API_BASE_URL, timeout=5)


@pytest.fixture
def example_body():
    return dict(EXAMPLE_BODY)


@pytest.fixture
def transport_failure():
    return SubmissionFailure(kind=FailureKind.TRANSPORT, reason="Could not reach the properties service")
