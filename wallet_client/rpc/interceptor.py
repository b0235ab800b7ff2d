"""Client interceptor that attaches outbound headers and inspects inbound ones."""

import collections
from collections.abc import Callable, Sequence

import grpc

from wallet_client.logging.structured import get_logger
from wallet_client.security.metadata import HOSTNAME_MD_KEY

logger = get_logger("interceptor")

Metadata = Sequence[tuple[str, str]]


class _ClientCallDetails(
    collections.namedtuple(
        "_ClientCallDetails",
        ("method", "timeout", "metadata", "credentials", "wait_for_ready", "compression"),
    ),
    grpc.ClientCallDetails,
):
    pass


def merge_metadata(call_metadata: Metadata | None, outbound: Metadata) -> list[tuple[str, str]]:
    """Append interceptor headers to the call's own headers.

    gRPC metadata is multi-valued, so a per-call value for the same key
    stays on the call alongside the interceptor's value.
    """
    merged = list(call_metadata or ())
    merged.extend(outbound)
    return merged


def print_server_host(headers: Metadata | None) -> None:
    """Print the serving backend's hostname when the server reports one."""
    for key, value in headers or ():
        if key == HOSTNAME_MD_KEY:
            print(f"server host: {value}")
            return
    logger.debug("No hostname header in response metadata")


class _HeaderInspectingStream:
    """Response iterator that reports initial metadata before the first message."""

    def __init__(self, call, on_headers: Callable[[Metadata | None], None]):
        self._call = call
        self._on_headers = on_headers
        self._headers_seen = False

    def __iter__(self):
        return self

    def __next__(self):
        if not self._headers_seen:
            self._headers_seen = True
            self._on_headers(self._call.initial_metadata())
        return next(self._call)

    def __getattr__(self, name):
        return getattr(self._call, name)


class HeaderClientInterceptor(grpc.UnaryUnaryClientInterceptor, grpc.UnaryStreamClientInterceptor):
    """Adds fixed outbound metadata to every call and hands inbound headers to `on_headers`.

    Works for any request/response message type, so one instance serves
    both the wallet and the stats channel.
    """

    def __init__(
        self,
        outbound: Metadata,
        on_headers: Callable[[Metadata | None], None] = print_server_host,
    ):
        self._outbound = tuple(outbound)
        self._on_headers = on_headers

    def _with_outbound(self, details: grpc.ClientCallDetails) -> _ClientCallDetails:
        return _ClientCallDetails(
            details.method,
            details.timeout,
            merge_metadata(details.metadata, self._outbound),
            details.credentials,
            getattr(details, "wait_for_ready", None),
            getattr(details, "compression", None),
        )

    def intercept_unary_unary(self, continuation, client_call_details, request):
        call = continuation(self._with_outbound(client_call_details), request)
        self._on_headers(call.initial_metadata())
        return call

    def intercept_unary_stream(self, continuation, client_call_details, request):
        call = continuation(self._with_outbound(client_call_details), request)
        return _HeaderInspectingStream(call, self._on_headers)


def intercept(channel: grpc.Channel, outbound: Metadata) -> grpc.Channel:
    return grpc.intercept_channel(channel, HeaderClientInterceptor(outbound))
