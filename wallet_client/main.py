"""Wallet client — command-line entry point.

A gRPC client for the wallet (balance) and stats (price) services that
attaches identity and routing headers to every call.
"""

import sys
import time
from collections.abc import Callable, Sequence

from wallet_client.clients.models import ClientConfig
from wallet_client.config.args import parse_args_or_exit
from wallet_client.dispatch.strategies import dispatch
from wallet_client.logging.structured import generate_run_id, get_logger, run_id_var, setup_logging
from wallet_client.rpc.interceptor import intercept
from wallet_client.security.credentials import SHUTDOWN_GRACE_SECONDS, close_channel, open_channel
from wallet_client.security.metadata import build_outbound_metadata
from wallet_client.services.registry import get_service
from wallet_client.telemetry import observability


def run(config: ClientConfig, *, sleep: Callable[[float], None] = time.sleep) -> None:
    """Run one command: open the channel, dispatch, and always release the channel."""
    logger = get_logger()
    logger.info(f"Will try to run {config.command.value}")

    telemetry_enabled = bool(config.gcp_client_project)
    if telemetry_enabled:
        observability.register_exporters(config.gcp_client_project)

    service = get_service(config.command.value)
    managed_channel = open_channel(config.target, config.creds)
    try:
        channel = intercept(managed_channel, build_outbound_metadata(config))
        dispatch(config, service, channel, sleep=sleep)
    finally:
        close_channel(managed_channel, SHUTDOWN_GRACE_SECONDS)
        if telemetry_enabled:
            observability.flush()


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging()
    token = run_id_var.set(generate_run_id())
    try:
        config = parse_args_or_exit(sys.argv[1:] if argv is None else argv)
        try:
            run(config)
        except KeyboardInterrupt:
            get_logger().info("Interrupted")
            return 130
        return 0
    finally:
        run_id_var.reset(token)


if __name__ == "__main__":
    sys.exit(main())
