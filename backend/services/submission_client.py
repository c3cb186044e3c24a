"""
Servicio de envío de propiedades - Crea la propiedad en el servicio REST
"""
import logging
from typing import Optional
import httpx
from config.settings import ClientConfig
from models.property_draft import PropertyDraft
from models.submission import FailureKind, SubmissionFailure, SubmissionResult, SubmissionSuccess

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class PropertySubmissionClient:
    """Turns a draft into a single POST against the properties endpoint"""

    def __init__(self, config: ClientConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._client = client

    async def create_property(self, draft: PropertyDraft) -> SubmissionResult:
        """
        Enviar el borrador como JSON al endpoint de propiedades

        Args:
            draft: Snapshot of the form values at submit time

        Returns:
            SubmissionSuccess when the service answered 2xx with an empty or JSON body,
            SubmissionFailure for every other outcome. Never raises for network errors.
        """
        url = self.config.properties_url
        payload = draft.to_payload()
        logger.info(f"POST {url} for property {payload['title']!r}")

        try:
            if self._client is not None:
                response = await self._client.post(
                    url, json=payload, headers=JSON_HEADERS, timeout=self.config.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                    response = await client.post(url, json=payload, headers=JSON_HEADERS)
        except httpx.TimeoutException as e:
            logger.warning(f"Properties service timed out after {self.config.timeout}s: {e}")
            return SubmissionFailure(
                kind=FailureKind.TIMEOUT,
                reason=f"The properties service did not answer within {self.config.timeout} seconds",
            )
        except httpx.InvalidURL as e:
            logger.warning(f"Invalid properties service URL {url!r}: {e}")
            return SubmissionFailure(
                kind=FailureKind.TRANSPORT,
                reason=f"Invalid properties service URL: {e}",
            )
        except httpx.HTTPError as e:
            logger.warning(f"Could not reach properties service at {url}: {e}")
            return SubmissionFailure(
                kind=FailureKind.TRANSPORT,
                reason=f"Could not reach the properties service: {e}",
            )

        logger.info(f"Properties service response status: {response.status_code}")

        if not response.is_success:
            logger.warning(f"Properties service rejected the property: {response.text[:500]}")
            return SubmissionFailure(
                kind=FailureKind.HTTP_STATUS,
                reason=f"The properties service answered with status {response.status_code}",
                status_code=response.status_code,
            )

        if not response.content.strip():
            return SubmissionSuccess(status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Malformed response body from properties service: {e}")
            return SubmissionFailure(
                kind=FailureKind.MALFORMED_RESPONSE,
                reason="The properties service returned a response that is not valid JSON",
                status_code=response.status_code,
            )

        return SubmissionSuccess(status_code=response.status_code, payload=body)
