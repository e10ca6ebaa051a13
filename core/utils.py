"""Assorted display helpers."""
import math
from decimal import ROUND_HALF_UP, Decimal

from loanfit.calculators import nz
from loanfit.presets import CURRENCY_SYMBOL


def format_currency(amount, symbol=CURRENCY_SYMBOL):
    """Whole currency units with thousands grouping, e.g. ``₹ 8,885``."""
    return f"{symbol} {round(nz(amount)):,}"


def format_pct(ratio, places=1):
    """Render a ratio such as ``0.425`` as ``42.5%``.

    Ties round half up on the exact binary value (``0.0625`` gives
    ``6.3%``), not half to even as ``format()`` does.
    """
    value = nz(ratio) * 100
    if not math.isfinite(value):
        return f"{value}%"
    quantum = Decimal(1).scaleb(-places)
    return f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)}%"
