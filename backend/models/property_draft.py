"""
PropertyDraft model - In-progress values of the add property form
"""
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field

# Wire name -> label shown next to each input
FIELD_LABELS = {
    "title": "Title",
    "askingPrice": "Asking Price",
    "description": "Description",
    "address": "Address",
    "img": "Image URL",
}


class UnknownFieldError(ValueError):
    """Raised when an edit targets a field the draft does not have"""

    def __init__(self, name: str):
        super().__init__(f"Unknown property field: {name!r}")
        self.name = name


class PropertyDraft(BaseModel):
    """Unsaved property listing, every field defaults to an empty string"""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    title: str = Field(default="", description="Listing title")
    asking_price: str = Field(default="", alias="askingPrice", description="Currency formatted price, never parsed")
    description: str = Field(default="", description="Free text description")
    address: str = Field(default="", description="Street address")
    img: str = Field(default="", description="Image URL")

    @classmethod
    def attribute_for(cls, name: str) -> str:
        """Resolve a wire or python field name to the model attribute"""
        for attribute, info in cls.model_fields.items():
            if name == attribute or name == info.alias:
                return attribute
        raise UnknownFieldError(name)

    def to_payload(self) -> Dict[str, str]:
        """JSON body sent to the properties service"""
        return self.model_dump(by_alias=True)
