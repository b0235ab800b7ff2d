"""Abstract base for backend services and the response records they produce."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

import grpc


@dataclass(frozen=True)
class PriceQuote:
    price: int


@dataclass(frozen=True)
class AddressBalance:
    address: str
    balance: int


@dataclass(frozen=True)
class BalanceSnapshot:
    total: int
    per_address: tuple[AddressBalance, ...] = ()


ResponseRecord = PriceQuote | BalanceSnapshot


class BackendService(ABC):
    """One backend reachable from the CLI, exposing unary and streaming reads."""

    name: str = ""
    supports_unary_watch: bool = False

    @abstractmethod
    def fetch(self, channel: grpc.Channel) -> ResponseRecord:
        """Issue one unary call and return its response.

        Raises:
            grpc.RpcError: the call failed at the transport level.
        """
        ...

    @abstractmethod
    def watch(self, channel: grpc.Channel) -> Iterator[ResponseRecord]:
        """Issue one server-streaming call and yield each response as it arrives.

        The iterator is lazy: nothing is requested until the first
        element is pulled, and each pull blocks until data or stream end.
        """
        ...
