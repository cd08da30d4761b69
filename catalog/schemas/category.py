from typing import Optional

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    """Схема для создания категории."""

    name: Optional[str] = Field(None, max_length=255, description="Название категории")
