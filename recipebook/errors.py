"""Failures raised by the recipe access layer."""


class RecipeError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(RecipeError):
    """Input was missing or malformed; raised before touching storage."""

    status_code = 422


class NotFound(RecipeError):
    status_code = 404


class StorageUnavailable(RecipeError):
    """The database could not be reached or failed the statement."""

    status_code = 503
