"""Renders response records as the lines the CLI prints."""

from wallet_client.services.base import BalanceSnapshot, PriceQuote, ResponseRecord


def render(record: ResponseRecord) -> list[str]:
    if isinstance(record, PriceQuote):
        return [f"price: {record.price}"]
    if isinstance(record, BalanceSnapshot):
        lines = [f"total balance: {record.total}"]
        lines.extend(
            f"- address: {entry.address}, balance: {entry.balance}" for entry in record.per_address
        )
        return lines
    raise TypeError(f"Cannot render {type(record).__name__}")


def print_response(record: ResponseRecord) -> None:
    for line in render(record):
        print(line)
