from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.staticfiles import StaticFiles


class SPAStaticFiles(StaticFiles):
    """Serve the frontend build; unknown paths fall back to index.html."""

    async def get_response(self, path: str, scope):
        try:
            response = await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response("index.html", scope)
        if response.status_code == 404:
            return await super().get_response("index.html", scope)
        return response
