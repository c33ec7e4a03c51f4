from __future__ import annotations

from ..trend.gmma import GMMAResult
import pandas as pd
import numpy as np


def _average(band: pd.DataFrame) -> pd.Series:
    return band.sum(axis=1, skipna=False) / band.shape[1]


def identify_trend_change(result: GMMAResult) -> pd.Series:
    """
    Crossovers of the trader-bundle average through the investor-bundle average.

        1  trader average moved from at-or-below to above (turning bullish)
       -1  trader average moved from at-or-above to below (turning bearish)
        0  no crossing on this bar

    A bar where the averages are equal is never a crossing by itself.
    """
    trader_avg = _average(result.trader)
    investor_avg = _average(result.investor)
    prev_trader_avg = trader_avg.shift(1)
    prev_investor_avg = investor_avg.shift(1)

    # NaN on the first bar keeps both masks False there
    turning_bullish = (trader_avg > investor_avg) & (prev_trader_avg <= prev_investor_avg)
    turning_bearish = (trader_avg < investor_avg) & (prev_trader_avg >= prev_investor_avg)

    trend = np.select([turning_bullish, turning_bearish], [1, -1], default=0)
    return pd.Series(trend, index=result.trader.index, name="trend_change", dtype="int64")
