"""
x402 paywall for the resource server.

Wires the x402 payment middleware in front of GET /weather. Verification
and settlement happen inside the x402 package and the remote facilitator;
this module only supplies the route's payment requirements.
"""

import logging

from fastapi import FastAPI
from x402.http import FacilitatorConfig, HTTPFacilitatorClient, PaymentOption
from x402.http.middleware.fastapi import PaymentMiddlewareASGI
from x402.http.types import RouteConfig
from x402.mechanisms.evm.exact import ExactEvmServerScheme
from x402.server import x402ResourceServer

from autopay.core.config import Settings

logger = logging.getLogger(__name__)

WEATHER_ROUTE = "GET /weather"


def build_routes(settings: Settings) -> dict[str, RouteConfig]:
    """
    Build the paywalled route table.

    Args:
        settings: Settings with a complete paywall configuration

    Returns:
        Mapping of "METHOD /path" to its payment requirements
    """
    return {
        WEATHER_ROUTE: RouteConfig(
            accepts=[
                PaymentOption(
                    scheme="exact",
                    pay_to=settings.evm_address,
                    price=settings.x402_price,
                    network=settings.x402_network,
                ),
            ],
            mime_type="application/json",
            description="Weather data",
        ),
    }


def install_paywall(app: FastAPI, settings: Settings) -> None:
    """
    Add the x402 payment middleware to an app.

    Args:
        app: Resource server application
        settings: Settings with a complete paywall configuration

    Raises:
        ValueError: If the recipient address or facilitator URL is missing
    """
    if not settings.paywall_configured:
        raise ValueError(f"Paywall configuration incomplete: {settings.missing_payment_config}")

    facilitator = HTTPFacilitatorClient(FacilitatorConfig(url=settings.facilitator_url))
    server = x402ResourceServer(facilitator)
    server.register(settings.x402_network, ExactEvmServerScheme())

    app.add_middleware(PaymentMiddlewareASGI, routes=build_routes(settings), server=server)
    logger.info(
        f"x402 paywall enabled for {WEATHER_ROUTE}: {settings.x402_price} on {settings.x402_network} "
        f"via {settings.facilitator_url}"
    )
