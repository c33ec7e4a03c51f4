from ..base import Indicator, IndicatorType
from ..trend.gmma import compute_gmma
from .spread import identify_signals
from .trend_change import identify_trend_change
import pandas as pd


class GMMASignals(Indicator):
    """
    GMMA signals in one frame.

    Output:
      DataFrame with columns:
        compression, expansion, bullish, bearish (bool)
        trend_change (int: 1 turning bullish, -1 turning bearish, 0 none)

    Signals are derived from the zero-placeholder GMMA bands, so warm-up bars
    take part in the comparisons the same way they do in identify_signals.
    """
    category = "signal"
    slug = "gmma_signals"
    name = "GMMA Signals"
    indicator_type = IndicatorType.SIGNAL

    def __init__(self, column: str = "close"):
        self.column = column

    def required_columns(self):
        return [self.column]

    def compute(self, df: pd.DataFrame) -> pd.DataFrame:
        result = compute_gmma(df[self.column])
        out = identify_signals(result)
        out["trend_change"] = identify_trend_change(result)
        return out
