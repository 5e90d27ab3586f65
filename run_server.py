#!/usr/bin/env python3
"""
Server startup script for the x402 auto-pay app.

Loads .env and starts either the MCP tool server (default) or the
x402 weather resource server.

Usage:
    python run_server.py [tool|resource]
"""

import os
import sys

# Set environment variables from .env if it exists
env_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), '.env')
if os.path.exists(env_path):
    from dotenv import load_dotenv
    load_dotenv(env_path)

SERVERS = {
    "tool": ("autopay.tool_server:app", "port"),
    "resource": ("autopay.resource_server:app", "resource_server_port"),
}


def resolve_server(which: str) -> tuple[str, str, int]:
    """Return the app import path, host and port for a server name."""
    from autopay.core.config import get_settings

    if which not in SERVERS:
        raise ValueError(f"Unknown server '{which}', expected one of: {', '.join(SERVERS)}")

    settings = get_settings()
    app_path, port_field = SERVERS[which]
    return app_path, settings.host, getattr(settings, port_field)


if __name__ == "__main__":
    import uvicorn

    from autopay.core.config import get_settings

    try:
        app_path, host, port = resolve_server(sys.argv[1] if len(sys.argv) > 1 else "tool")
    except ValueError as e:
        sys.exit(str(e))

    uvicorn.run(
        app_path,
        host=host,
        port=port,
        reload=get_settings().debug,
    )
