import logging
from contextlib import asynccontextmanager
from typing import List

from fastapi import Depends, FastAPI, Form, Path, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from . import crud, schemas
from .config import get_settings
from .db import SessionLocal, init_db
from .errors import RecipeError, ValidationError


logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Initialize DB once at startup
    init_db()
    logger.info("Recipe book ready on %s", settings.database_url)
    yield


app = FastAPI(
    title=settings.title,
    version="1.0.0",
    description="List, create and fetch recipes.",
    lifespan=lifespan,
)
templates = Jinja2Templates(directory=str(settings.templates_dir))

ERROR_RESPONSES = {
    404: {"model": schemas.ErrorDetail, "description": "Recipe not found"},
    503: {"model": schemas.ErrorDetail, "description": "Storage unavailable"},
}


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@app.exception_handler(RecipeError)
async def recipe_error_handler(request: Request, exc: RecipeError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def read_root(request: Request, db: Session = Depends(get_db)):
    recipes = crud.list_recipes(db)
    return templates.TemplateResponse(
        request, "index.html", {"recipes": recipes, "error": None}
    )


@app.post("/add-recipe", response_class=HTMLResponse)
def add_recipe(
    request: Request,
    name: str = Form(""),
    ingredience: str = Form(""),
    db: Session = Depends(get_db),
):
    try:
        crud.create_recipe(db, {"name": name, "ingredience": ingredience})
    except ValidationError as exc:
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "recipes": crud.list_recipes(db),
                "error": "Please provide both a name and the ingredients.",
                "name": name,
                "ingredience": ingredience,
            },
            status_code=exc.status_code,
        )
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@app.get("/recipes", response_class=HTMLResponse)
def recipe_list_page(request: Request, db: Session = Depends(get_db)):
    recipes = crud.list_recipes(db)
    return templates.TemplateResponse(request, "recipes.html", {"recipes": recipes})


@app.get(
    "/api/recipes",
    response_model=List[schemas.Recipe],
    responses={503: ERROR_RESPONSES[503]},
)
def api_list_recipes(db: Session = Depends(get_db)):
    return crud.list_recipes(db)


@app.get(
    "/api/recipes/{recipe_id}",
    response_model=schemas.Recipe,
    responses=ERROR_RESPONSES,
)
def api_get_recipe(
    recipe_id: int = Path(..., gt=0, examples=[1]),
    db: Session = Depends(get_db),
):
    return crud.get_recipe(db, recipe_id)


@app.post(
    "/api/recipe",
    response_model=schemas.Recipe,
    status_code=status.HTTP_201_CREATED,
    responses={503: ERROR_RESPONSES[503]},
)
def api_create_recipe(recipe: schemas.RecipeCreate, db: Session = Depends(get_db)):
    return crud.create_recipe(db, recipe)
