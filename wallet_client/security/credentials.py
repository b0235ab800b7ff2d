"""Channel credentials and channel lifetime.

Maps the --creds mode to a grpc ChannelCredentials object and opens or
releases the channel to the selected backend.
"""

import threading

import grpc
import grpc.experimental

from wallet_client.clients.models import CredentialsType
from wallet_client.logging.structured import get_logger

SHUTDOWN_GRACE_SECONDS = 5.0

logger = get_logger("channel")


def channel_credentials(mode: CredentialsType) -> grpc.ChannelCredentials:
    """Return the channel credentials for a credentials mode.

    xDS credentials negotiate security from the control plane and fall
    back to plaintext when none is configured.
    """
    insecure = grpc.experimental.insecure_channel_credentials()
    if mode is CredentialsType.XDS:
        return grpc.xds_channel_credentials(insecure)
    return insecure


def open_channel(target: str, mode: CredentialsType) -> grpc.Channel:
    # grpc refuses insecure credentials on secure_channel
    if mode is CredentialsType.INSECURE:
        return grpc.insecure_channel(target)
    return grpc.secure_channel(target, channel_credentials(mode))


def close_channel(channel: grpc.Channel, grace: float = SHUTDOWN_GRACE_SECONDS) -> bool:
    """Close a channel, waiting at most `grace` seconds.

    Returns True if the close completed within the grace period.
    """
    closer = threading.Thread(target=channel.close, name="channel-close", daemon=True)
    closer.start()
    closer.join(grace)
    if closer.is_alive():
        logger.warning(
            "Channel did not shut down in time",
            extra={"log_data": {"grace_seconds": grace}},
        )
        return False
    return True
