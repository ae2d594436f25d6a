from typing import Optional

from fastapi import FastAPI
from fastapi.responses import FileResponse

from .config import Settings
from .files import SiteFiles, readable_file_response


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    index_path = settings.root_dir / settings.index_file

    app = FastAPI(title="Static Site", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings

    # Registered before the mount so "/" resolves here first.
    @app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
    async def index() -> FileResponse:
        return await readable_file_response(index_path)

    app.mount(
        "/",
        SiteFiles(directory=settings.root_dir, index_file=settings.index_file),
        name="static",
    )
    return app
