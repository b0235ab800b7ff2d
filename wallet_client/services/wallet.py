"""Wallet (balance) service."""

from collections.abc import Iterator

import grpc

from wallet_client.protos.wallet import BalanceRequest, WalletStub
from wallet_client.services.base import AddressBalance, BackendService, BalanceSnapshot


def to_snapshot(response) -> BalanceSnapshot:
    return BalanceSnapshot(
        total=response.balance,
        per_address=tuple(
            AddressBalance(address=a.address, balance=a.balance) for a in response.addresses
        ),
    )


class WalletService(BackendService):
    name = "balance"
    supports_unary_watch = True

    def _request(self):
        return BalanceRequest(include_balance_per_address=True)

    def fetch(self, channel: grpc.Channel) -> BalanceSnapshot:
        return to_snapshot(WalletStub(channel).FetchBalance(self._request()))

    def watch(self, channel: grpc.Channel) -> Iterator[BalanceSnapshot]:
        # Wait for the channel to connect instead of failing fast
        responses = WalletStub(channel).WatchBalance(self._request(), wait_for_ready=True)
        for response in responses:
            yield to_snapshot(response)
