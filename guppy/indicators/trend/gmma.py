from __future__ import annotations
from dataclasses import dataclass
import logging

from ..base import Indicator, IndicatorType
from ...defaults import (
    TRADER_PERIODS, INVESTOR_PERIODS,
    TRADER_PREFIX, INVESTOR_PREFIX,
    MIN_PRICES, SENTINEL,
)
from ...errors import InvalidInput
from .ema import as_price_series, compute_ema
import pandas as pd

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class GMMAResult:
    """
    The two GMMA band matrices.

    trader:   columns s3, s5, s8, s10, s12, s15
    investor: columns l30, l35, l40, l45, l50, l60

    Each column is one EMA line aligned to the input prices.
    """
    trader: pd.DataFrame
    investor: pd.DataFrame

    def to_frame(self) -> pd.DataFrame:
        """Both bundles side by side, trader columns first."""
        return pd.concat([self.trader, self.investor], axis=1)


def _bundle(s: pd.Series, periods, prefix: str, fill_value: float) -> pd.DataFrame:
    cols = {f"{prefix}{n}": compute_ema(s, n, fill_value) for n in periods}
    return pd.DataFrame(cols, index=s.index)


def compute_gmma(prices, fill_value: float = SENTINEL) -> GMMAResult:
    """
    Guppy Multiple Moving Average over a price series.

    Only the trivial length floor is enforced: three bars are enough even
    though most lines will still be in warm-up.

    Raises:
        InvalidInput: `prices` is None or holds fewer than 3 values.
    """
    if prices is None or len(prices) < MIN_PRICES:
        raise InvalidInput(f"Data array must contain at least {MIN_PRICES} elements")

    s = as_price_series(prices)
    logger.debug("Computing GMMA over %d prices (fill_value=%s)", len(s), fill_value)

    return GMMAResult(
        trader=_bundle(s, TRADER_PERIODS, TRADER_PREFIX, fill_value),
        investor=_bundle(s, INVESTOR_PERIODS, INVESTOR_PREFIX, fill_value),
    )


class GMMA(Indicator):
    """
    Guppy Multiple Moving Average (GMMA) — Daryl Guppy

    Two bundles of EMAs:
      Short-term:  3, 5, 8, 10, 12, 15
      Long-term:  30, 35, 40, 45, 50, 60

    Output:
      DataFrame with columns:
        s3, s5, s8, s10, s12, s15, l30, l35, l40, l45, l50, l60

    Notes:
      - Each line is seeded with the SMA of its own window and then follows the
        recursive EMA; bars before that hold `fill_value`.
      - The bundles are fixed by definition and are not constructor arguments.
    """
    category = "trend"
    slug = "gmma"
    name = "Guppy Multiple Moving Average"
    indicator_type = IndicatorType.LINE  # multiple line series

    def __init__(self, column: str = "close", fill_value: float = SENTINEL):
        """
        Args:
            column (str): Source price column (default 'close').
            fill_value (float): Warm-up placeholder; 0.0 by default, np.nan to mask.
        """
        self.column = column
        self.fill_value = fill_value

    def required_columns(self):
        return [self.column]

    def compute(self, df: pd.DataFrame) -> pd.DataFrame:
        return compute_gmma(df[self.column], self.fill_value).to_frame()
