from pydantic import BaseModel, ConfigDict, Field


class RecipeBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(
        ..., min_length=1, json_schema_extra={"example": "Ramen"}
    )
    ingredience: str = Field(
        ...,
        min_length=1,
        json_schema_extra={"example": "Soba, broth, pork, eggs"},
    )


class RecipeCreate(RecipeBase):
    pass


class Recipe(RecipeBase):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int = Field(..., json_schema_extra={"example": 1})
    created_at: str = Field(
        ...,
        serialization_alias="createdAt",
        json_schema_extra={"example": "2024-05-01 12:00:00"},
    )
    updated_at: str = Field(
        ...,
        serialization_alias="updatedAt",
        json_schema_extra={"example": "2024-05-01 12:00:00"},
    )


class ErrorDetail(BaseModel):
    detail: str
