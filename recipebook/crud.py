import logging
from typing import Any, Mapping, Union

import pydantic
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import models, schemas
from .errors import NotFound, StorageUnavailable, ValidationError


logger = logging.getLogger(__name__)

# largest value an INTEGER PRIMARY KEY can hold
MAX_RECIPE_ID = 2**63 - 1


def _recipe_id(value: Any) -> int:
    """Coerce a path or query value into a positive recipe id."""
    if value is None or isinstance(value, bool):
        raise ValidationError("Recipe id is required and must be a positive integer")
    if isinstance(value, int):
        recipe_id = value
    else:
        text = str(value).strip()
        if not (text.isascii() and text.isdigit()):
            raise ValidationError(f"Recipe id must be a positive integer, got {value!r}")
        recipe_id = int(text)
    if recipe_id < 1:
        raise ValidationError(f"Recipe id must be a positive integer, got {value!r}")
    return recipe_id


def _new_recipe(recipe: Union[schemas.RecipeCreate, Mapping[str, Any]]) -> schemas.RecipeCreate:
    try:
        return schemas.RecipeCreate.model_validate(recipe)
    except pydantic.ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in exc.errors()
        )
        raise ValidationError(f"Invalid recipe: {fields or 'malformed body'}")


def list_recipes(db: Session):
    try:
        return db.query(models.Recipe).all()
    except SQLAlchemyError as exc:
        logger.error("Listing recipes failed: %s", exc)
        raise StorageUnavailable("Recipe storage is unavailable") from exc


def get_recipe(db: Session, recipe_id: Any):
    recipe_id = _recipe_id(recipe_id)
    if recipe_id > MAX_RECIPE_ID:
        logger.info("Recipe %s not found", recipe_id)
        raise NotFound(f"Recipe {recipe_id} not found")
    try:
        db_recipe = (
            db.query(models.Recipe)
            .filter(models.Recipe.id == recipe_id)
            .first()
        )
    except SQLAlchemyError as exc:
        logger.error("Fetching recipe %s failed: %s", recipe_id, exc)
        raise StorageUnavailable("Recipe storage is unavailable") from exc
    if db_recipe is None:
        logger.info("Recipe %s not found", recipe_id)
        raise NotFound(f"Recipe {recipe_id} not found")
    return db_recipe


def create_recipe(db: Session, recipe: Union[schemas.RecipeCreate, Mapping[str, Any]]):
    recipe = _new_recipe(recipe)
    db_recipe = models.Recipe(name=recipe.name, ingredience=recipe.ingredience)
    try:
        db.add(db_recipe)
        db.commit()
        # loads the generated id and timestamp defaults
        db.refresh(db_recipe)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Creating recipe %r failed: %s", recipe.name, exc)
        raise StorageUnavailable("Recipe storage is unavailable") from exc
    logger.info("Created recipe %s (%s)", db_recipe.id, db_recipe.name)
    return db_recipe
