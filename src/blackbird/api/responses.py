"""Response classes shared by the API."""

from fastapi.responses import JSONResponse


class Utf8JSONResponse(JSONResponse):
    """JSON response that declares its charset."""

    media_type = "application/json; charset=utf-8"
