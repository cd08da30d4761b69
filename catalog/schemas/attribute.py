from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AttributeCreate(BaseModel):
    """Схема для создания атрибута."""

    name: Optional[str] = Field(None, max_length=255, description="Название атрибута")


class AttributeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
