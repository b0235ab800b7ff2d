"""Shared fixtures for the wallet client test suite."""

import logging
from concurrent import futures

import grpc
import pytest

import wallet_client.services.registry as registry_mod
from wallet_client.config.settings import get_settings
from wallet_client.logging.structured import LOGGER_NAME
from wallet_client.protos import stats, wallet


class FakeRpcError(grpc.RpcError):
    """Transport failure as raised by grpc, without a live call behind it."""

    def __init__(self, code=grpc.StatusCode.UNAVAILABLE, details="connection refused"):
        super().__init__(details)
        self._code = code
        self._details = details

    def code(self):
        return self._code

    def details(self):
        return self._details


class FakeBackend:
    """Serves both the Wallet and Stats services and records what it received."""

    def __init__(self):
        self.hostname: str | None = "backend-1"
        self.balance = 250
        self.addresses = [("addr-1", 150), ("addr-2", 100)]
        self.prices = [100, 101, 102]
        self.calls: list[str] = []
        self.metadata: list[list[tuple[str, str]]] = []

    def _record(self, method, context):
        self.calls.append(method)
        self.metadata.append([(m.key, m.value) for m in context.invocation_metadata()])
        if self.hostname is not None:
            context.send_initial_metadata((("hostname", self.hostname),))

    def _balance_response(self):
        return wallet.BalanceResponse(
            balance=self.balance,
            addresses=[wallet.BalancePerAddress(address=a, balance=b) for a, b in self.addresses],
        )

    def fetch_balance(self, request, context):
        self._record("FetchBalance", context)
        return self._balance_response()

    def watch_balance(self, request, context):
        self._record("WatchBalance", context)
        for _ in range(3):
            yield self._balance_response()

    def fetch_price(self, request, context):
        self._record("FetchPrice", context)
        return stats.PriceResponse(price=self.prices[0])

    def watch_price(self, request, context):
        self._record("WatchPrice", context)
        for price in self.prices:
            yield stats.PriceResponse(price=price)

    def handlers(self):
        wallet_handler = grpc.method_handlers_generic_handler(wallet.SERVICE, {
            "FetchBalance": grpc.unary_unary_rpc_method_handler(
                self.fetch_balance,
                request_deserializer=wallet.BalanceRequest.FromString,
                response_serializer=wallet.BalanceResponse.SerializeToString,
            ),
            "WatchBalance": grpc.unary_stream_rpc_method_handler(
                self.watch_balance,
                request_deserializer=wallet.BalanceRequest.FromString,
                response_serializer=wallet.BalanceResponse.SerializeToString,
            ),
        })
        stats_handler = grpc.method_handlers_generic_handler(stats.SERVICE, {
            "FetchPrice": grpc.unary_unary_rpc_method_handler(
                self.fetch_price,
                request_deserializer=stats.PriceRequest.FromString,
                response_serializer=stats.PriceResponse.SerializeToString,
            ),
            "WatchPrice": grpc.unary_stream_rpc_method_handler(
                self.watch_price,
                request_deserializer=stats.PriceRequest.FromString,
                response_serializer=stats.PriceResponse.SerializeToString,
            ),
        })
        return (wallet_handler, stats_handler)


@pytest.fixture
def backend():
    """An in-process gRPC server. Yields (FakeBackend, address)."""
    fake = FakeBackend()
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=4))
    server.add_generic_rpc_handlers(fake.handlers())
    port = server.add_insecure_port("localhost:0")
    server.start()
    yield fake, f"localhost:{port}"
    server.stop(None)


@pytest.fixture(autouse=True)
def reset_logger():
    """Undo setup_logging between tests so caplog sees records."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def reset_registry(monkeypatch):
    monkeypatch.setattr(registry_mod, "_services", {})
    yield


@pytest.fixture
def override_settings(monkeypatch):
    """Factory fixture: set env vars and clear settings cache.

    Usage:
        override_settings(LOG_LEVEL="DEBUG", LOG_FILE="/tmp/client.log")
    """
    def _override(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key.upper(), str(value))
        get_settings.cache_clear()

    yield _override

    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
