"""Data models returned by the relayer's wallet endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional


def parse_amount(value: Any) -> int:
    """Parse an integer amount encoded as a number, decimal string or hex string."""

    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith("0x"):
            return int(text, 16)
        return int(Decimal(text))
    raise ValueError(f"Invalid amount: {value!r}")


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Relayer timestamps are milliseconds since the epoch."""

    if value in (None, ""):
        return None
    millis = parse_amount(value)
    return datetime.fromtimestamp(millis / 1000, timezone.utc)


@dataclass(slots=True)
class Order:
    """An order resting in the wallet."""

    id: str
    base_mint: str
    quote_mint: str
    side: str
    amount: int
    worst_case_price: str = "0"
    min_fill_size: int = 0
    allow_external_matches: bool = False

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Order":
        return cls(
            id=str(payload.get("id", "")),
            base_mint=str(payload.get("base_mint", "")),
            quote_mint=str(payload.get("quote_mint", "")),
            side=str(payload.get("side", "")),
            amount=parse_amount(payload.get("amount")),
            worst_case_price=str(payload.get("worst_case_price", "0")),
            min_fill_size=parse_amount(payload.get("min_fill_size")),
            allow_external_matches=bool(payload.get("allow_external_matches", False)),
        )


@dataclass(slots=True)
class Balance:
    """Token balance held by the wallet, with accrued fees."""

    mint: str
    amount: int
    relayer_fee_balance: int = 0
    protocol_fee_balance: int = 0

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Balance":
        return cls(
            mint=str(payload.get("mint", "")),
            amount=parse_amount(payload.get("amount")),
            relayer_fee_balance=parse_amount(payload.get("relayer_fee_balance")),
            protocol_fee_balance=parse_amount(payload.get("protocol_fee_balance")),
        )

    @property
    def has_fees(self) -> bool:
        return self.relayer_fee_balance > 0 or self.protocol_fee_balance > 0


@dataclass(slots=True)
class Wallet:
    """Back-of-queue wallet state as seen by the relayer."""

    id: str
    orders: List[Order] = field(default_factory=list)
    balances: List[Balance] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], *, filter_defaults: bool = True) -> "Wallet":
        orders = [Order.from_payload(item) for item in payload.get("orders") or []]
        balances = [Balance.from_payload(item) for item in payload.get("balances") or []]
        wallet = cls(id=str(payload.get("id", "")), orders=orders, balances=balances)
        if filter_defaults:
            wallet = wallet.without_defaults()
        return wallet

    def without_defaults(self) -> "Wallet":
        """Drop the zero-valued placeholder slots the relayer pads wallets with."""

        return Wallet(
            id=self.id,
            orders=[order for order in self.orders if order.amount > 0],
            balances=[balance for balance in self.balances if balance.amount > 0],
        )


@dataclass(slots=True)
class Fill:
    amount: int
    price: float
    timestamp: Optional[datetime] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Fill":
        price_info = payload.get("price") or {}
        if not isinstance(price_info, dict):
            price_info = {"price": price_info}
        return cls(
            amount=parse_amount(payload.get("amount")),
            price=float(price_info.get("price") or 0.0),
            timestamp=parse_timestamp(price_info.get("timestamp")),
        )


@dataclass(slots=True)
class OrderMetadata:
    """Historical view of an order, including its fills."""

    id: str
    state: str
    data: Order
    fills: List[Fill] = field(default_factory=list)
    created: Optional[datetime] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "OrderMetadata":
        return cls(
            id=str(payload.get("id", "")),
            state=str(payload.get("state", "")),
            data=Order.from_payload(payload.get("data") or {}),
            fills=[Fill.from_payload(item) for item in payload.get("fills") or []],
            created=parse_timestamp(payload.get("created")),
        )

    @property
    def filled_amount(self) -> int:
        return sum(fill.amount for fill in self.fills)

    @property
    def fill_percentage(self) -> float:
        if self.data.amount <= 0:
            return 0.0
        return min(100.0, self.filled_amount * 100.0 / self.data.amount)


@dataclass(slots=True)
class TaskInfo:
    task_type: str
    update_type: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "TaskInfo":
        if not isinstance(payload, dict):
            return cls(task_type=str(payload or ""))
        update_type = payload.get("update_type")
        return cls(
            task_type=str(payload.get("task_type", "")),
            update_type=str(update_type) if update_type else None,
        )


@dataclass(slots=True)
class Task:
    """An entry in the relayer's task history for the wallet."""

    id: str
    state: str
    created_at: Optional[datetime]
    task_info: TaskInfo

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Task":
        return cls(
            id=str(payload.get("id", "")),
            state=str(payload.get("state", "")),
            created_at=parse_timestamp(payload.get("created_at")),
            task_info=TaskInfo.from_payload(payload.get("task_info")),
        )


__all__ = [
    "Balance",
    "Fill",
    "Order",
    "OrderMetadata",
    "Task",
    "TaskInfo",
    "Wallet",
    "parse_amount",
    "parse_timestamp",
]
