"""
Router de Agregar Propiedad - Formulario que crea la propiedad y redirige
"""
from fastapi import APIRouter, Depends, Form
from fastapi.responses import JSONResponse, RedirectResponse
from config.settings import ClientConfig, load_client_config
from models.property_draft import FIELD_LABELS
from models.submission import SubmissionFailure
from services.form_controller import AddPropertyForm
from services.navigation import RedirectNavigator
from services.submission_client import PropertySubmissionClient
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["add-property"])

FORM_PATH = "/add-property"
REDIRECT_PATH = "/"


def get_client_config() -> ClientConfig:
    return load_client_config()


def get_submission_client(config: ClientConfig = Depends(get_client_config)) -> PropertySubmissionClient:
    return PropertySubmissionClient(config)


@router.get(FORM_PATH)
async def describe_add_property_form():
    """Describir los campos del formulario"""
    return {
        "action": FORM_PATH,
        "method": "POST",
        "fields": [{"name": name, "label": label, "value": ""} for name, label in FIELD_LABELS.items()],
        "submit_label": "Submit",
    }


@router.post(FORM_PATH)
async def submit_add_property_form(
    title: str = Form(default=""),
    askingPrice: str = Form(default=""),
    description: str = Form(default=""),
    address: str = Form(default=""),
    img: str = Form(default=""),
    client: PropertySubmissionClient = Depends(get_submission_client),
):
    """Crear la propiedad y redirigir a la raíz si el servicio la aceptó"""
    navigator = RedirectNavigator()
    form = AddPropertyForm(client, navigator, redirect_to=REDIRECT_PATH)

    fields = {
        "title": title,
        "askingPrice": askingPrice,
        "description": description,
        "address": address,
        "img": img,
    }
    for name, value in fields.items():
        form.set_field(name, value)

    result = await form.submit()

    if navigator.target is not None:
        logger.info(f"Property {title!r} created, redirecting to {navigator.target}")
        return RedirectResponse(url=navigator.target, status_code=303)

    failure: SubmissionFailure = result
    return JSONResponse(
        status_code=502,
        content={
            "success": False,
            "error": failure.reason,
            "kind": failure.kind.value,
            "status_code": failure.status_code,
            "draft": form.values,
        },
    )
