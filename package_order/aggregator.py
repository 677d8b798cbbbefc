"""Derived views over a completed order result."""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Sequence, Union

from .models import OrderSummary, Package, PackageView

CENTS = Decimal("0.01")


def format_currency(value: Union[Decimal, int, float, str]) -> str:
    """Format an amount with exactly two decimals, e.g. ``$12.50``."""
    amount = Decimal(str(value))
    with localcontext() as ctx:
        # room for every integer digit plus the two cents digits
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"${amount:f}"


def _format_raw(value: Decimal) -> str:
    # courier prices are shown exactly as the server sent them, never in exponent form
    return f"${value:f}"


def _format_weight(value: Decimal) -> str:
    if value == value.to_integral_value():
        return f"{int(value)}g"
    return f"{value.normalize():f}g"


def _exact_sum(values: Sequence[Decimal]) -> Decimal:
    if not values:
        return Decimal("0")
    with localcontext() as ctx:
        # wide enough that no addition rounds
        digits = max(v.adjusted() for v in values) - min(v.as_tuple().exponent for v in values)
        ctx.prec = max(ctx.prec, digits + len(str(len(values))) + 2)
        return sum(values, Decimal("0"))


def headline(package_count: int) -> str:
    suffix = "" if package_count == 1 else "s"
    return f"This order has {package_count} package{suffix}"


def aggregate(packages: Sequence[Package]) -> OrderSummary:
    """
    Summarize an order result.

    The total courier charge is rounded to two decimals while each
    package's courier price keeps the precision returned by the server.
    """
    total = _exact_sum([package.courier_price for package in packages])
    views = [
        PackageView(
            number=index,
            items=list(package.items),
            items_display=", ".join(package.items),
            weight_display=_format_weight(package.total_weight),
            price_display=format_currency(package.total_price),
            courier_display=_format_raw(package.courier_price),
        )
        for index, package in enumerate(packages, start=1)
    ]
    return OrderSummary(
        package_count=len(packages),
        headline=headline(len(packages)),
        total_courier_price=total,
        total_courier_display=format_currency(total),
        packages=views,
    )
