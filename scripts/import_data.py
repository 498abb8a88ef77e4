from recipebook import crud, models
from recipebook.config import get_settings
from recipebook.db import SessionLocal, init_db
from recipebook.errors import ValidationError
from recipebook.recipes import load_recipes


def main():
    init_db()
    p = get_settings().seed_file
    if not p.exists():
        print(f'{p} not found')
        return
    db = SessionLocal()
    added = 0
    try:
        for r in load_recipes(p):
            name = (r.get('name') or '').strip()
            exists = (
                db.query(models.Recipe)
                .filter(models.Recipe.name == name)
                .first()
            )
            if exists:
                continue
            try:
                crud.create_recipe(db, r)
            except ValidationError as exc:
                print(f'Skipping {r!r}: {exc.detail}')
                continue
            added += 1
    finally:
        db.close()
    print(f'Imported {added} recipes')


if __name__ == '__main__':
    main()
