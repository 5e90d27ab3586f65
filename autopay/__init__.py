"""
x402 Auto-Pay App - MCP tool server and x402 paywalled resource server.

Key modules:
    - tool_server: FastAPI app hosting the MCP tool server
    - resource_server: FastAPI app serving the paywalled weather endpoint
    - tools: MCP tool registration
    - services: Payment record store, payment providers, downstream client
    - x402: x402 paywall middleware wiring
    - models: Payment record model
    - schemas: Tool input schemas
    - core: Configuration and error handling
"""

__version__ = "1.0.0"
