"""Tables for wallet state and order history."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from ..sdk.schemas import Balance, Order, OrderMetadata, Wallet
from ..sdk.token_mapping import TokenMapping

WALLET_FIELDS = ("orders", "balances", "fees")


def format_side(side: str) -> Text:
    if side.lower() == "buy":
        return Text("BUY", style="green")
    return Text("SELL", style="red")


def format_external(allow_external: bool) -> Text:
    return Text("Yes", style="green") if allow_external else Text("No", style="red")


def format_time(value: Optional[datetime]) -> Text:
    if value is None:
        return Text("-", style="dim")
    return Text(value.astimezone().strftime("%b %d, %Y %H:%M"), style="dim")


def format_orders(orders: Sequence[Order], tokens: TokenMapping) -> RenderableType:
    if not orders:
        return Text("No orders found")
    table = Table(title="Orders", box=box.SIMPLE_HEAVY, title_justify="left")
    table.add_column("ID", no_wrap=True)
    table.add_column("Side")
    table.add_column("Asset")
    table.add_column("Amount", justify="right")
    table.add_column("External")
    for order in orders:
        token = tokens.find_by_address(order.base_mint)
        table.add_row(
            order.id,
            format_side(order.side),
            token.ticker,
            token.format_amount(order.amount),
            format_external(order.allow_external_matches),
        )
    table.caption = f"Total orders: {len(orders)}"
    return table


def format_balances(balances: Sequence[Balance], tokens: TokenMapping) -> RenderableType:
    if not balances:
        return Text("No balances found")
    table = Table(title="Balances", box=box.SIMPLE_HEAVY, title_justify="left")
    table.add_column("Asset")
    table.add_column("Amount", justify="right")
    for balance in balances:
        token = tokens.find_by_address(balance.mint)
        table.add_row(token.ticker, token.format_amount(balance.amount))
    table.caption = f"Total tokens: {len(balances)}"
    return table


def format_fees(balances: Sequence[Balance], tokens: TokenMapping) -> RenderableType:
    with_fees = [balance for balance in balances if balance.has_fees]
    if not with_fees:
        return Text("No fees owed")
    table = Table(title="Fees", box=box.SIMPLE_HEAVY, title_justify="left")
    table.add_column("Asset")
    table.add_column("Relayer fee", justify="right")
    table.add_column("Protocol fee", justify="right")
    for balance in with_fees:
        token = tokens.find_by_address(balance.mint)
        table.add_row(
            token.ticker,
            token.format_amount(balance.relayer_fee_balance),
            token.format_amount(balance.protocol_fee_balance),
        )
    return table


def format_wallet(wallet: Wallet, tokens: TokenMapping, *, field: Optional[str] = None) -> RenderableType:
    if field == "orders":
        return format_orders(wallet.orders, tokens)
    if field == "balances":
        return format_balances(wallet.balances, tokens)
    if field == "fees":
        return format_fees(wallet.balances, tokens)
    if field is not None:
        return Text("No data to display")
    sections: List[RenderableType] = []
    if wallet.orders:
        sections.append(format_orders(wallet.orders, tokens))
    if wallet.balances:
        sections.append(format_balances(wallet.balances, tokens))
    if not sections:
        return Text("Wallet is empty")
    return Group(*sections)


def format_order_history(orders: Sequence[OrderMetadata], tokens: TokenMapping) -> RenderableType:
    if not orders:
        return Text("No orders found in history")
    table = Table(title="Order History", box=box.SIMPLE_HEAVY, title_justify="left")
    table.add_column("Created")
    table.add_column("ID", no_wrap=True)
    table.add_column("Side")
    table.add_column("Asset")
    table.add_column("Amount", justify="right")
    table.add_column("Filled", justify="right")
    table.add_column("State")
    for entry in orders:
        token = tokens.find_by_address(entry.data.base_mint)
        table.add_row(
            format_time(entry.created),
            entry.id,
            format_side(entry.data.side),
            token.ticker,
            token.format_amount(entry.data.amount),
            f"{entry.fill_percentage:.1f}%",
            entry.state,
        )
    table.caption = f"Showing {len(orders)} orders"
    return table


__all__ = [
    "WALLET_FIELDS",
    "format_balances",
    "format_fees",
    "format_order_history",
    "format_orders",
    "format_time",
    "format_wallet",
]
