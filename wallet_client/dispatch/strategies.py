"""Call strategies — unary, streaming watch, and unary watch.

Exactly one strategy runs per invocation. Transport failures end the
unary and streaming strategies with a logged warning; the unary watch
logs them and keeps polling.
"""

import time
from collections.abc import Callable, Iterable

import grpc

from wallet_client.clients.models import ClientConfig
from wallet_client.logging.structured import CallTimer, get_logger
from wallet_client.output.printer import print_response
from wallet_client.services.base import BackendService, ResponseRecord

UNARY_WATCH_INTERVAL_SECONDS = 1.0

logger = get_logger("dispatch")

Printer = Callable[[ResponseRecord], None]


def _log_rpc_failure(error: grpc.RpcError) -> None:
    code = error.code() if hasattr(error, "code") else None
    details = error.details() if hasattr(error, "details") else str(error)
    logger.warning(
        "RPC failed: %s", code,
        extra={"log_data": {"status_code": str(code), "details": details}},
    )


def run_unary(fetch: Callable[[], ResponseRecord], printer: Printer = print_response) -> None:
    try:
        with CallTimer() as timer:
            record = fetch()
    except grpc.RpcError as e:
        _log_rpc_failure(e)
        return
    logger.debug("Unary call completed", extra={"log_data": {"latency_ms": timer.elapsed_ms}})
    printer(record)


def run_streaming_watch(
    open_stream: Callable[[], Iterable[ResponseRecord]], printer: Printer = print_response
) -> None:
    """Print every record of one server stream until the server closes it."""
    count = 0
    try:
        for record in open_stream():
            printer(record)
            count += 1
    except grpc.RpcError as e:
        _log_rpc_failure(e)
        return
    logger.info("Stream closed by server", extra={"log_data": {"responses": count}})


def run_unary_watch(
    fetch: Callable[[], ResponseRecord],
    printer: Printer = print_response,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Poll with unary calls forever. Only an exception from `sleep` or a signal ends it."""
    while True:
        try:
            record = fetch()
        except grpc.RpcError as e:
            # Keep polling; a watch should survive transient failures
            _log_rpc_failure(e)
        else:
            printer(record)
        sleep(UNARY_WATCH_INTERVAL_SECONDS)


def dispatch(
    config: ClientConfig,
    service: BackendService,
    channel: grpc.Channel,
    *,
    printer: Printer = print_response,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Run the strategy selected by the config against one backend."""
    if config.unary_watch and (config.watch or not service.supports_unary_watch):
        logger.warning(
            "unary_watch ignored",
            extra={"log_data": {"command": service.name, "watch": config.watch}},
        )

    if config.watch:
        run_streaming_watch(lambda: service.watch(channel), printer)
    elif config.unary_watch and service.supports_unary_watch:
        run_unary_watch(lambda: service.fetch(channel), printer, sleep)
    else:
        run_unary(lambda: service.fetch(channel), printer)
