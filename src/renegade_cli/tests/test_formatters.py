from __future__ import annotations

import io
from datetime import datetime, timezone

from rich.console import Console

from renegade_cli.errors import ConfigError, ErrorCode
from renegade_cli.formatters.error import format_error
from renegade_cli.formatters.task import format_task_history, format_task_status
from renegade_cli.formatters.wallet import format_order_history, format_wallet
from renegade_cli.sdk.schemas import Balance, Fill, Order, OrderMetadata, Task, TaskInfo, Wallet
from renegade_cli.tests.conftest import USDC, WETH


def _render(renderable) -> str:
    console = Console(file=io.StringIO(), width=200, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def _wallet() -> Wallet:
    return Wallet(
        id="w1",
        orders=[Order(id="order-1", base_mint=WETH, quote_mint=USDC, side="Sell", amount=2 * 10**18)],
        balances=[Balance(mint=USDC, amount=1_500_000, relayer_fee_balance=250_000)],
    )


def test_format_error_lists_suggestions() -> None:
    error = ConfigError("Bad things", ErrorCode.CONFIG_READ_ERROR, ["First fix", "Second fix"])
    text = format_error(error).plain
    assert text.startswith("Error: Bad things")
    assert "1. First fix" in text and "2. Second fix" in text
    assert "renegade setup --help" in text


def test_format_error_plain_exception() -> None:
    text = format_error(RuntimeError("kaboom")).plain
    assert "kaboom" in text
    assert "To fix this" not in text


def test_format_wallet_sections(tokens) -> None:
    output = _render(format_wallet(_wallet(), tokens))
    assert "Orders" in output and "Balances" in output
    assert "SELL" in output and "WETH" in output
    assert "1.5" in output and "USDC" in output

    orders_only = _render(format_wallet(_wallet(), tokens, field="orders"))
    assert "Balances" not in orders_only

    fees = _render(format_wallet(_wallet(), tokens, field="fees"))
    assert "0.25" in fees


def test_format_empty_wallet(tokens) -> None:
    assert "Wallet is empty" in _render(format_wallet(Wallet(id="w1"), tokens))
    assert "No orders found" in _render(format_wallet(Wallet(id="w1"), tokens, field="orders"))


def test_format_order_history(tokens) -> None:
    entry = OrderMetadata(
        id="o1",
        state="Filled",
        data=Order(id="o1", base_mint=WETH, quote_mint=USDC, side="Buy", amount=4),
        fills=[Fill(amount=1, price=3000.0)],
        created=datetime(2024, 1, 2, tzinfo=timezone.utc),
    )
    output = _render(format_order_history([entry], tokens))
    assert "25.0%" in output
    assert "Showing 1 orders" in output
    assert "No orders found in history" in _render(format_order_history([], tokens))


def test_format_task_history() -> None:
    tasks = [
        Task(id="t1", state="Completed", created_at=None, task_info=TaskInfo("UpdateWallet", "Deposit")),
        Task(id="t2", state="Failed", created_at=None, task_info=TaskInfo("PayOfflineFee")),
    ]
    output = _render(format_task_history(tasks))
    assert "Deposit (UpdateWallet)" in output
    assert "Showing 2 tasks" in output
    assert format_task_status("proving").plain == "⋯"
    assert format_task_status("mystery").plain == "?"
