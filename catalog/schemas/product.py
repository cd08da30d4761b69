from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.db.models import MAX_ID


class AttributeAssignmentIn(BaseModel):
    """Значение атрибута в теле запроса товара."""

    model_config = ConfigDict(populate_by_name=True)

    attribute_id: int = Field(
        ..., alias="attributeId", ge=1, le=MAX_ID, description="ID атрибута"
    )
    value: str = Field(..., description="Значение атрибута")


class ProductIn(BaseModel):
    """Схема для создания и полного обновления товара."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    category_id: int = Field(..., alias="categoryId", ge=1, le=MAX_ID)
    description: Optional[str] = None
    attributes: List[AttributeAssignmentIn] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    def assignments(self) -> List[tuple]:
        return [(a.attribute_id, a.value) for a in self.attributes]


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class AttributeAssignmentOut(BaseModel):
    """Значение атрибута у товара с названием атрибута."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    attribute_id: int = Field(..., alias="attributeId")
    name: str
    value: str


class ProductOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    price: float
    description: Optional[str] = None
    category_id: int = Field(..., alias="categoryId")
    category: Optional[CategoryOut] = None
    attributes: List[AttributeAssignmentOut] = Field(default_factory=list)
    attributes_string: str = Field("", alias="attributesString")
