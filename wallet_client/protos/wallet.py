"""Messages and stub for the grpc.examples.wallet.Wallet service."""

from wallet_client.protos._builder import FieldDescriptorProto, build_messages, field, message

PACKAGE = "grpc.examples.wallet"
SERVICE = f"{PACKAGE}.Wallet"

FETCH_BALANCE = f"/{SERVICE}/FetchBalance"
WATCH_BALANCE = f"/{SERVICE}/WatchBalance"

_messages = build_messages(
    "wallet_client/wallet.proto",
    PACKAGE,
    message(
        "BalanceRequest",
        field("include_balance_per_address", 1, FieldDescriptorProto.TYPE_BOOL),
    ),
    message(
        "BalancePerAddress",
        field("address", 1, FieldDescriptorProto.TYPE_STRING),
        field("balance", 2, FieldDescriptorProto.TYPE_INT64),
    ),
    message(
        "BalanceResponse",
        field("balance", 1, FieldDescriptorProto.TYPE_INT64),
        field(
            "addresses", 2, FieldDescriptorProto.TYPE_MESSAGE,
            repeated=True, type_name=f".{PACKAGE}.BalancePerAddress",
        ),
    ),
)

BalanceRequest = _messages["BalanceRequest"]
BalancePerAddress = _messages["BalancePerAddress"]
BalanceResponse = _messages["BalanceResponse"]


class WalletStub:
    """Client stub for the Wallet service."""

    def __init__(self, channel):
        self.FetchBalance = channel.unary_unary(
            FETCH_BALANCE,
            request_serializer=BalanceRequest.SerializeToString,
            response_deserializer=BalanceResponse.FromString,
        )
        self.WatchBalance = channel.unary_stream(
            WATCH_BALANCE,
            request_serializer=BalanceRequest.SerializeToString,
            response_deserializer=BalanceResponse.FromString,
        )
