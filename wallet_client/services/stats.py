"""Stats (price) service."""

from collections.abc import Iterator

import grpc

from wallet_client.protos.stats import PriceRequest, StatsStub
from wallet_client.services.base import BackendService, PriceQuote


class StatsService(BackendService):
    name = "price"

    def fetch(self, channel: grpc.Channel) -> PriceQuote:
        response = StatsStub(channel).FetchPrice(PriceRequest())
        return PriceQuote(price=response.price)

    def watch(self, channel: grpc.Channel) -> Iterator[PriceQuote]:
        for response in StatsStub(channel).WatchPrice(PriceRequest()):
            yield PriceQuote(price=response.price)
