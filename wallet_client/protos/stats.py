"""Messages and stub for the grpc.examples.wallet.stats.Stats service."""

from wallet_client.protos._builder import FieldDescriptorProto, build_messages, field, message

PACKAGE = "grpc.examples.wallet.stats"
SERVICE = f"{PACKAGE}.Stats"

FETCH_PRICE = f"/{SERVICE}/FetchPrice"
WATCH_PRICE = f"/{SERVICE}/WatchPrice"

_messages = build_messages(
    "wallet_client/stats.proto",
    PACKAGE,
    message("PriceRequest"),
    message("PriceResponse", field("price", 1, FieldDescriptorProto.TYPE_INT64)),
)

PriceRequest = _messages["PriceRequest"]
PriceResponse = _messages["PriceResponse"]


class StatsStub:
    """Client stub for the Stats service."""

    def __init__(self, channel):
        self.FetchPrice = channel.unary_unary(
            FETCH_PRICE,
            request_serializer=PriceRequest.SerializeToString,
            response_deserializer=PriceResponse.FromString,
        )
        self.WatchPrice = channel.unary_stream(
            WATCH_PRICE,
            request_serializer=PriceRequest.SerializeToString,
            response_deserializer=PriceResponse.FromString,
        )
