import errno
import os
import stat
from typing import Optional

import anyio
from fastapi import HTTPException
from fastapi.responses import FileResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.datastructures import URL, Headers
from starlette.staticfiles import NotModifiedResponse
from starlette.types import Scope


def ensure_readable(path) -> None:
    """Open and close ``path`` so read errors surface before any headers go out."""
    with open(path, "rb"):
        pass


async def readable_file_response(
    path, stat_result: Optional[os.stat_result] = None
) -> FileResponse:
    try:
        await anyio.to_thread.run_sync(ensure_readable, path)
    except (FileNotFoundError, IsADirectoryError):
        raise HTTPException(status_code=404, detail="Not Found")
    except OSError:
        raise HTTPException(status_code=500, detail="Could not read file")
    return FileResponse(path, stat_result=stat_result)


class SiteFiles(StaticFiles):
    """``StaticFiles`` that serves ``index.html`` for directory URLs.

    Unlike ``html=True`` there is no ``404.html`` fallback. Directories without
    an index are 404, never listed, and read errors are 500.
    """

    def __init__(self, *, directory, index_file: str = "index.html") -> None:
        super().__init__(directory=directory)
        self.index_file = index_file

    async def get_response(self, path: str, scope: Scope) -> Response:
        if scope["method"] not in ("GET", "HEAD"):
            raise HTTPException(status_code=405)

        try:
            full_path, stat_result = await anyio.to_thread.run_sync(self.lookup_path, path)
            is_dir = stat_result is not None and stat.S_ISDIR(stat_result.st_mode)
            if is_dir:
                index_path = os.path.join(path, self.index_file)
                full_path, stat_result = await anyio.to_thread.run_sync(self.lookup_path, index_path)
        except OSError as exc:
            if exc.errno == errno.ENAMETOOLONG:
                raise HTTPException(status_code=404)
            raise HTTPException(status_code=500, detail="Could not read file")

        if stat_result is None or not stat.S_ISREG(stat_result.st_mode):
            raise HTTPException(status_code=404)

        if is_dir and not scope["path"].endswith("/"):
            url = URL(scope=scope)
            return RedirectResponse(url=url.replace(path=url.path + "/"))

        response = await readable_file_response(full_path, stat_result)
        if self.is_not_modified(response.headers, Headers(scope=scope)):
            return NotModifiedResponse(response.headers)
        return response
