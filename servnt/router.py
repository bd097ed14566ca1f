import logging
from aiohttp import web

from servnt.dispatch import Dispatcher
from servnt.libs.errors import ResolveException

logger = logging.getLogger("servnt.router")

INDEX_FILE = "index.html"

DISPATCHER = web.AppKey("dispatcher", Dispatcher)

def serve(request: web.Request, path: str) -> web.Response:
    dispatcher = request.app[DISPATCHER]

    try:
        asset = dispatcher.dispatch(path)
    except ResolveException as error:
        # clients only ever see a bare 500
        logger.warning("%s %r: %s", type(error).__name__, path, error)
        return web.Response(status=500)

    return web.Response(body=asset.body, headers={"Content-Type": asset.content_type})

async def route_index(request: web.Request):
    return serve(request, INDEX_FILE)

async def route(request: web.Request):
    path = request.match_info["name"]
    if path == "":
        path = INDEX_FILE

    return serve(request, path)

def create_app(dispatcher: Dispatcher) -> web.Application:
    app = web.Application()
    app[DISPATCHER] = dispatcher

    app.router.add_get("/", route_index)
    app.router.add_get(r"/{name:.*}", route)

    return app
