"""JSON Responses — response class carrying the content type and CORS headers.

Invariants:
    - Every response built here has Content-Type: application/json; charset=utf-8
    - Every response built here carries the three Access-Control-* headers
    - Non-ASCII text is emitted literally, not as \\uXXXX escapes

Design Decisions:
    - Headers set by the response class, not a middleware: responses produced by
      the catch-all exception handler bypass user middleware, and they must carry
      the headers too
"""

from fastapi.responses import JSONResponse, Response

from glitchstore.config import get_settings

JSON_MEDIA_TYPE = "application/json; charset=utf-8"
ALLOWED_METHODS = "GET, POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type"


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": get_settings().cors_allow_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


class GlitchJSONResponse(JSONResponse):
    media_type = JSON_MEDIA_TYPE

    def __init__(self, content=None, status_code: int = 200, headers=None, **kwargs):
        merged = cors_headers()
        if headers:
            merged.update(headers)
        super().__init__(content, status_code=status_code, headers=merged, **kwargs)


def empty_response(status_code: int = 200) -> Response:
    """Bodyless response with the same headers as GlitchJSONResponse."""
    return Response(
        status_code=status_code, headers=cors_headers(), media_type=JSON_MEDIA_TYPE,
    )
