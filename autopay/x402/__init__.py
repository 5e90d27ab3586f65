"""x402 payment middleware wiring for the resource server."""

from autopay.x402.paywall import WEATHER_ROUTE, build_routes, install_paywall

__all__ = ["WEATHER_ROUTE", "build_routes", "install_paywall"]
