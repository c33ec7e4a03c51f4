from ..base import Indicator, IndicatorType
from ...defaults import SENTINEL
import pandas as pd
import numpy as np


def as_price_series(prices) -> pd.Series:
    """Coerce a 1-D price sequence to a float64 Series (Series keep their index)."""
    if isinstance(prices, pd.Series):
        return prices.astype("float64")
    return pd.Series(np.asarray(prices, dtype="float64"))


def compute_ema(prices, period: int, fill_value: float = SENTINEL) -> pd.Series:
    """
    SMA-seeded recursive EMA.

        EMA[period-1] = mean(prices[0:period])
        EMA[i]        = (prices[i] - EMA[i-1]) * 2 / (period + 1) + EMA[i-1]

    Bars before period-1 hold `fill_value` (0.0 by default, a warm-up
    placeholder rather than a real value). A series shorter than `period`
    comes back entirely filled.

    Returns:
        pd.Series: float64, same length and index as `prices`, named EMA(period).

    Raises:
        ValueError: `period` is not positive.
    """
    n = int(period)
    if n <= 0:
        raise ValueError("period must be > 0")
    s = as_price_series(prices)
    values = s.to_numpy()
    ema = np.full(len(values), fill_value, dtype="float64")

    if len(values) >= n:
        multiplier = 2.0 / (n + 1)
        state = values[:n].mean()
        ema[n - 1] = state
        for i in range(n, len(values)):
            state = (values[i] - state) * multiplier + state
            ema[i] = state

    return pd.Series(ema, index=s.index, name=f"EMA({n})")


class EMA(Indicator):
    category = "trend"
    slug = "ema"
    name = "Exponential Moving Average"
    indicator_type = IndicatorType.LINE

    def __init__(self, window: int = 20, column: str = "close", fill_value: float = SENTINEL):
        """
        Exponential Moving Average (EMA), seeded with the SMA of the first window.

        Args:
            window (int): the smoothing period.
            column (str): which column to compute the EMA on (usually 'close').
            fill_value (float): value for warm-up bars; pass np.nan to mask them.
        """
        if window <= 0:
            raise ValueError("window must be > 0")
        self.window = int(window)
        self.column = column
        self.fill_value = fill_value

    def required_columns(self):
        return [self.column]

    def compute(self, df: pd.DataFrame) -> pd.Series:
        return compute_ema(df[self.column], self.window, self.fill_value)
