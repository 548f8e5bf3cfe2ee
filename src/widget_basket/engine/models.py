"""
Data models for the basket pricing engine.

Uses dataclasses for structured, type-safe data representation.
Configuration records are frozen; result records are built up during a calculation.
"""
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..errors import ConfigurationError


def to_decimal(value, name: str = "value") -> Decimal:
    """
    Convert a price-like value to Decimal.

    Floats go through str() so 32.95 becomes Decimal("32.95") rather than
    its binary approximation.
    """
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ConfigurationError(f"{name} is not a valid decimal: {value!r}")


def _non_negative(value, name: str) -> Decimal:
    amount = to_decimal(value, name)
    if amount.is_nan() or amount < 0:
        raise ConfigurationError(f"{name} must be a non-negative amount, got {value!r}")
    return amount


@dataclass(frozen=True)
class Product:
    """A catalog entry."""
    code: str
    name: str
    price: Decimal

    def __post_init__(self):
        object.__setattr__(self, "code", str(self.code))
        object.__setattr__(self, "price", _non_negative(self.price, f"price of {self.code}"))


@dataclass(frozen=True)
class DeliveryRule:
    """Flat delivery cost charged when the subtotal reaches min_total."""
    min_total: Decimal
    cost: Decimal

    def __post_init__(self):
        object.__setattr__(self, "min_total", _non_negative(self.min_total, "min_total"))
        object.__setattr__(self, "cost", _non_negative(self.cost, "cost"))

    def applies_to(self, subtotal: Decimal) -> bool:
        return subtotal >= self.min_total


@dataclass
class TraceStep:
    """A single step in the pricing trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class LineItem:
    """The charge for one unit added to the basket."""
    code: str
    name: str
    unit_price: Decimal
    charge: Decimal
    prior_count: int
    offer: Optional[str] = None  # label of the offer applied, if any

    @property
    def discount(self) -> Decimal:
        return self.unit_price - self.charge


@dataclass
class Result:
    """Complete result of a basket calculation."""
    items: list[str]
    lines: list[LineItem] = field(default_factory=list)
    subtotal: Decimal = Decimal("0")
    delivery_cost: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the result trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert to a plain dict with amounts as strings, for JSON output."""
        return {
            "items": list(self.items),
            "subtotal": str(self.subtotal),
            "delivery_cost": str(self.delivery_cost),
            "total": str(self.total),
            "lines": [
                {
                    "code": line.code,
                    "name": line.name,
                    "unit_price": str(line.unit_price),
                    "charge": str(line.charge),
                    "offer": line.offer,
                }
                for line in self.lines
            ],
        }
