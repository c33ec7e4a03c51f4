"""
guppy — Guppy Multiple Moving Average (GMMA) bands and signals.

    from guppy import compute_gmma, identify_signals, identify_trend_change

    result = compute_gmma(prices)        # GMMAResult(trader=..., investor=...)
    signals = identify_signals(result)   # compression/expansion/bullish/bearish
    trend = identify_trend_change(result)
"""

from .defaults import TRADER_PERIODS, INVESTOR_PERIODS
from .errors import InvalidInput
from .indicators.trend.ema import compute_ema
from .indicators.trend.gmma import GMMAResult, compute_gmma
from .indicators.signal.spread import identify_signals
from .indicators.signal.trend_change import identify_trend_change

__all__ = [
    "TRADER_PERIODS",
    "INVESTOR_PERIODS",
    "InvalidInput",
    "GMMAResult",
    "compute_ema",
    "compute_gmma",
    "identify_signals",
    "identify_trend_change",
]
