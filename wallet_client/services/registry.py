"""Service registry — singleton map of command name → backend service."""

from wallet_client.services.base import BackendService
from wallet_client.services.stats import StatsService
from wallet_client.services.wallet import WalletService

_services: dict[str, BackendService] = {}


def get_service(name: str) -> BackendService:
    """Get or create the backend service for a command."""
    if name in _services:
        return _services[name]

    if name == "balance":
        _services[name] = WalletService()
    elif name == "price":
        _services[name] = StatsService()
    else:
        raise ValueError(f"Unknown service: {name}")

    return _services[name]
