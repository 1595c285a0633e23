import argparse
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mcp.server.fastmcp import FastMCP

from . import __version__
from .config import Settings
from .dependencies import get_mcp_server, get_settings
from .logging_config import setup_logging


async def not_found(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse({"error": "Not found. Use /mcp endpoint."}, status_code=404)


def create_app(settings: Optional[Settings] = None, mcp: Optional[FastMCP] = None) -> FastAPI:
    """Build the network variant: MCP streamable HTTP at /mcp behind permissive CORS."""
    settings = settings or get_settings()
    mcp = mcp or get_mcp_server()

    # Creates the session manager the lifespan below runs
    mcp_app = mcp.streamable_http_app()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        logging.info(f"Save-to-NAS MCP server running on http://localhost:{settings.port}/mcp")
        logging.info(f"NAS IP: {settings.nas_ip}")
        async with mcp.session_manager.run():
            yield
        logging.info("Save-to-NAS MCP server shutting down...")

    app = FastAPI(
        title="Save-to-NAS MCP Server",
        description="Lister NAS shares og gemmer filer/mapper på dem via MCP",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Mcp-Session-Id"],
        expose_headers=["Mcp-Session-Id"],
    )

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "version": __version__, **settings.summary}

    # Unmatched paths 404 inside the mounted MCP app
    app.add_exception_handler(404, not_found)
    mcp_app.add_exception_handler(404, not_found)

    # Registered last so /health is matched first
    app.mount("/", mcp_app)
    return app


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="save-to-nas",
        description="MCP server for listing NAS shares and saving files to them.",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="stdio for local MCP clients, http to serve /mcp over the network",
    )
    parser.add_argument("--host", default=None, help="Bind address for http (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Port for http (default: PORT or 3847)")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings)

    host = args.host or settings.host
    port = args.port or settings.port

    if args.transport == "http":
        uvicorn.run(create_app(settings), host=host, port=port, log_config=None)
    else:
        logging.info(f"Save-to-NAS MCP server running on stdio (NAS IP: {settings.nas_ip})")
        get_mcp_server().run(transport="stdio")


if __name__ == "__main__":
    main()
