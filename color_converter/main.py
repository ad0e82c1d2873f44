import argparse
import os

from color_converter.dependencies import config
from color_converter.internal.colors import ColorConversionError
from color_converter.internal.config import Config
from color_converter.internal.shared_state import CONFIG_PATH_ENV, SharedState
import color_converter.routers.router_convert as router_convert
import color_converter.routers.router_site as router_site
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from colorama import Fore, init
init(autoreset=True)


async def conversion_error_handler(request: Request, exc: ColorConversionError):
    print(f"[Server] {Fore.YELLOW}|::| {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})


def create_app(app_config: Config) -> FastAPI:
    app = FastAPI(title="Color Converter")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ColorConversionError, conversion_error_handler)

    app.include_router(router_convert.router)
    app.include_router(router_site.router)

    if app_config.has_static_dir:
        app.mount(router_site.SITE_PATH, StaticFiles(directory=app_config.static_dir, html=True), name="front")
    else:
        print(f"[Server] {Fore.YELLOW}|::| Warning! Static dir '{app_config.static_dir}' not found. {router_site.SITE_PATH} is not served")

    return app


server = create_app(config)


def main():
    parser = argparse.ArgumentParser(description="Hex <-> RGB color converter service")
    parser.add_argument("--host", type=str)
    parser.add_argument("--port", type=int)
    parser.add_argument("--hotreload", action="store_true")
    parser.add_argument("--config", type=str, help="path to config.ini")
    args = parser.parse_args()

    app_config = config
    if args.config:
        # the reloader re-imports this module in a fresh process and picks it up from the env
        os.environ[CONFIG_PATH_ENV] = args.config
        SharedState.reset()
        app_config = SharedState().config

    host = args.host or app_config.host
    port = args.port or app_config.port
    print(f"[Server] {host}:{port}")

    if args.hotreload:
        uvicorn.run("color_converter.main:server", host=host, port=port, reload=True)
    else:
        uvicorn.run(create_app(app_config), host=host, port=port)


if __name__ == "__main__":
    main()
