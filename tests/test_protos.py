"""Tests for wallet_client/protos — runtime-built message classes."""

from wallet_client.protos import stats, wallet


class TestWalletMessages:

    def test_full_names(self):
        assert wallet.BalanceRequest.DESCRIPTOR.full_name == "grpc.examples.wallet.BalanceRequest"
        assert wallet.BalanceResponse.DESCRIPTOR.full_name == "grpc.examples.wallet.BalanceResponse"

    def test_request_wire_format(self):
        request = wallet.BalanceRequest(include_balance_per_address=True)
        assert request.SerializeToString() == b"\x08\x01"

    def test_response_decodes_repeated_addresses(self):
        # balance=7, addresses=[{address: "a", balance: 3}]
        payload = b"\x08\x07\x12\x05\x0a\x01a\x10\x03"
        response = wallet.BalanceResponse.FromString(payload)
        assert response.balance == 7
        assert [(a.address, a.balance) for a in response.addresses] == [("a", 3)]

    def test_method_paths(self):
        assert wallet.FETCH_BALANCE == "/grpc.examples.wallet.Wallet/FetchBalance"
        assert wallet.WATCH_BALANCE == "/grpc.examples.wallet.Wallet/WatchBalance"


class TestStatsMessages:

    def test_price_response(self):
        assert stats.PriceResponse.FromString(b"\x08\x2a").price == 42

    def test_empty_request(self):
        assert stats.PriceRequest().SerializeToString() == b""

    def test_method_paths(self):
        assert stats.FETCH_PRICE == "/grpc.examples.wallet.stats.Stats/FetchPrice"
        assert stats.WATCH_PRICE == "/grpc.examples.wallet.stats.Stats/WatchPrice"
