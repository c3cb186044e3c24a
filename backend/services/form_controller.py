"""
Controlador del formulario de propiedades - Estado del borrador y envío
"""
import logging
from typing import Dict, Optional
from models.form_state import FormState
from models.property_draft import PropertyDraft
from models.submission import SubmissionFailure, SubmissionResult, SubmissionSuccess
from services.navigation import Navigator
from services.submission_client import PropertySubmissionClient

logger = logging.getLogger(__name__)


class FormClosedError(ValueError):
    """Raised when the form is used after it navigated away"""


class AddPropertyForm:
    """
    Holds the draft for a new property and submits it.

    The draft is owned here and only a snapshot is handed to the client, so
    edits made while a request is in flight never change its body.
    """

    def __init__(self, client: PropertySubmissionClient, navigator: Navigator, redirect_to: str = "/"):
        self.client = client
        self.navigator = navigator
        self.redirect_to = redirect_to
        self.state = FormState.EDITING
        self.last_error: Optional[SubmissionFailure] = None
        self._draft: Optional[PropertyDraft] = PropertyDraft()

    @property
    def values(self) -> Dict[str, str]:
        """Valores actuales del formulario con los nombres del payload"""
        self._ensure_open()
        return self._draft.to_payload()

    def set_field(self, name: str, value: str) -> None:
        """Actualizar un campo del borrador, sin validación"""
        self._ensure_open()
        setattr(self._draft, PropertyDraft.attribute_for(name), value)
        if self.state == FormState.ERROR:
            self.state = FormState.EDITING

    async def submit(self) -> SubmissionResult:
        """Enviar un snapshot del borrador y navegar solo si fue creado"""
        self._ensure_open()
        snapshot = self._draft.model_copy()
        self.state = FormState.SUBMITTING

        result = await self.client.create_property(snapshot)

        if isinstance(result, SubmissionSuccess):
            # A second in-flight submit may have finished first
            if self.state != FormState.DONE:
                self.state = FormState.DONE
                self.last_error = None
                self._draft = None
                self.navigator.push(self.redirect_to)
            return result

        logger.info(f"Property submission failed ({result.kind.value}): {result.reason}")
        if self.state != FormState.DONE:
            self.state = FormState.ERROR
            self.last_error = result
        return result

    def _ensure_open(self):
        if self.state == FormState.DONE:
            raise FormClosedError("The property was already created, start a new form")
