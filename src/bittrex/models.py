"""Data models for Bittrex v3 REST resources.

CRITICAL: All monetary values use Decimal. Never use float for prices,
quantities, or fees. Bittrex sends them as JSON strings and expects them back
as JSON strings; pydantic parses the strings exactly and ``WireDecimal`` dumps them
back as fixed-point strings.

Optional decimals are ``None`` when the field is absent. ``Decimal("0")`` is a
real value (an unfilled order has ``fillQuantity`` of zero) and must not be
used as a stand-in for "missing".
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Fixed-point on the wire: str(Decimal("0.00000001")) would give "1E-8".
WireDecimal = Annotated[
    Decimal, PlainSerializer(lambda v: format(v, "f"), return_type=str, when_used="json")
]


class OrderSide(str, Enum):
    """Order direction."""

    BUY = "BUY"
    SELL = "SELL"


class OrderType(str, Enum):
    """Order type. Ceiling orders bound total spend instead of unit price."""

    LIMIT = "LIMIT"
    MARKET = "MARKET"
    CEILING_LIMIT = "CEILING_LIMIT"
    CEILING_MARKET = "CEILING_MARKET"


class TimeInForce(str, Enum):
    """How long an order stays on the book."""

    GOOD_TIL_CANCELLED = "GOOD_TIL_CANCELLED"
    IMMEDIATE_OR_CANCEL = "IMMEDIATE_OR_CANCEL"
    FILL_OR_KILL = "FILL_OR_KILL"
    POST_ONLY_GOOD_TIL_CANCELLED = "POST_ONLY_GOOD_TIL_CANCELLED"
    BUY_NOW = "BUY_NOW"
    INSTANT = "INSTANT"


class OrderStatusFilter(str, Enum):
    """Which order book ``GET /orders/{filter}`` lists."""

    OPEN = "open"
    CLOSED = "closed"


class BittrexModel(BaseModel):
    """Base model: camelCase wire names, unknown keys ignored, immutable."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class ExchangeResult(BittrexModel):
    """A single resource the exchange may answer with ``{"code": "..."}`` instead.

    Such an answer decodes with every other field unset and ``code`` holding
    the reason, e.g. MARKET_DOES_NOT_EXIST or INSUFFICIENT_FUNDS.
    """

    code: str | None = None

    @property
    def is_error(self) -> bool:
        """True when the exchange answered with an error code."""
        return self.code is not None


class Currency(ExchangeResult):
    """A currency listed on the exchange.

    Every field is optional: Bittrex answers unknown symbols with ``{}``.
    """

    symbol: str | None = None
    name: str | None = None
    coin_type: str | None = None
    status: str | None = None
    min_confirmations: int | None = None
    notice: str | None = None
    tx_fee: WireDecimal | None = None
    logo_url: str | None = None
    prohibited_in: list[str] = Field(default_factory=list)
    base_address: str | None = None


class Balance(BittrexModel):
    """Account balance for one currency."""

    currency_symbol: str
    total: WireDecimal
    available: WireDecimal
    updated_at: str | None = None


class Market(ExchangeResult):
    """A tradeable currency pair."""

    symbol: str | None = None
    base_currency_symbol: str | None = None
    quote_currency_symbol: str | None = None
    min_trade_size: WireDecimal | None = None
    precision: int | None = None
    status: str | None = None
    created_at: str | None = None
    notice: str | None = None
    prohibited_in: list[str] = Field(default_factory=list)


class MarketSummary(ExchangeResult):
    """Rolling 24h statistics for a market."""

    symbol: str | None = None
    high: WireDecimal | None = None
    low: WireDecimal | None = None
    volume: WireDecimal | None = None
    quote_volume: WireDecimal | None = None
    percent_change: WireDecimal | None = None
    updated_at: str | None = None


class MarketTicker(ExchangeResult):
    """Top-of-book and last trade for a market."""

    symbol: str | None = None
    last_trade_rate: WireDecimal | None = None
    bid_rate: WireDecimal | None = None
    ask_rate: WireDecimal | None = None


class OrderCancel(BittrexModel):
    """Order to cancel atomically when a new order is placed."""

    order_type: OrderType | None = Field(default=None, alias="type")
    order_id: str | None = Field(default=None, alias="id")


class Order(ExchangeResult):
    """An order, used both as the create request and as the exchange's answer.

    Request fields: market_symbol, direction, order_type and time_in_force are
    required by Bittrex; quantity, limit, ceiling, client_order_id, use_awards
    and order_to_cancel depend on the order type.

    Response fields: order_id, fill_quantity, commission, proceeds, status and
    the timestamps.

    A rejected request decodes into an Order with only ``code`` set.
    """

    order_id: str | None = Field(default=None, alias="id")
    market_symbol: str | None = None
    direction: OrderSide | None = None
    order_type: OrderType | None = Field(default=None, alias="type")
    quantity: WireDecimal | None = None
    limit: WireDecimal | None = None
    ceiling: WireDecimal | None = None
    time_in_force: TimeInForce | None = None
    client_order_id: str | None = None
    fill_quantity: WireDecimal | None = None
    commission: WireDecimal | None = None
    proceeds: WireDecimal | None = None
    status: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    closed_at: str | None = None
    use_awards: bool | None = None
    order_to_cancel: OrderCancel | None = None

    def to_payload(self) -> str:
        """Serialize as a create-order JSON body.

        Unset fields are omitted entirely, and Decimal values are written as
        JSON strings.
        """
        return self.model_dump_json(by_alias=True, exclude_none=True)
