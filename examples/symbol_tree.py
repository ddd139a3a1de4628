#!/usr/bin/env python3
from __future__ import annotations

import argparse

from laakhay.trade import Order, Symbol, Symbols, SymbolType, get_reference_data

SAMPLE = Symbols(
    [
        Symbol(id=1, type=SymbolType.FIAT, code="USD", name="US Dollar"),
        Symbol(id=2, type=SymbolType.CRYPTO, parent_id=1, code="USDT", name="Tether"),
        Symbol(id=3, type=SymbolType.CRYPTO, parent_id=1, code="USDC", name="USD Coin"),
        Symbol(id=4, type=SymbolType.FIAT, parent_id=1, code="EUR", name="Euro"),
        Symbol(id=14, type=SymbolType.CRYPTO, code="BTC", name="Bitcoin"),
        Symbol(id=22, type=SymbolType.CRYPTO, parent_id=14, code="BTCFT", name="BTC Futures Token"),
    ]
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print the sample symbol tree and decode an order")
    p.add_argument("code", nargs="?", default="BTC", help="Currency code to look up")
    return p.parse_args()


def print_tree(symbols: Symbols, parent_id: int = 0, depth: int = 0) -> None:
    for symbol in symbols.children(parent_id):
        print(f"{'  ' * depth}{symbol.code:8} ({symbol.type}, id={symbol.id})")
        print_tree(symbols, symbol.id, depth + 1)


def main() -> None:
    args = parse_args()
    print_tree(SAMPLE)

    currency = get_reference_data().currencies.get(args.code)
    print(f"\n{args.code}: {currency.description if currency else 'not found'}")

    order = Order.from_exchange(
        {
            "order_id": "b68d69564a79dea4776afa33d1d2fcab",
            "customer_id": "41",
            "order_status": "shipped",
            "order_approved_at": "2018-02-28 10:40:35",
            "order_purchase_timestamp": "",
        }
    )
    print(f"\n{order.to_json()}")


if __name__ == "__main__":
    main()
