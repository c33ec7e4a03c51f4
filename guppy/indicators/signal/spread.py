from __future__ import annotations

from ..trend.gmma import GMMAResult
import pandas as pd


def _spread(band: pd.DataFrame) -> pd.Series:
    """Distance between the highest and lowest line of a bundle, per bar."""
    return band.max(axis=1, skipna=False) - band.min(axis=1, skipna=False)


def identify_signals(result: GMMAResult) -> pd.DataFrame:
    """
    Spread dynamics and group separation of a GMMA.

    Columns (bool, aligned to the bands):
        compression : both bundles narrowed versus the previous bar
        expansion   : both bundles widened versus the previous bar
        bullish     : every trader line above every investor line
        bearish     : every trader line below every investor line

    The first bar has no predecessor and is always False. Warm-up placeholders
    are compared as plain numbers; NaN placeholders make a comparison False.
    """
    trader, investor = result.trader, result.investor

    trader_spread = _spread(trader)
    investor_spread = _spread(investor)
    prev_trader_spread = trader_spread.shift(1)
    prev_investor_spread = investor_spread.shift(1)

    out = pd.DataFrame(
        {
            "compression": (trader_spread < prev_trader_spread) & (investor_spread < prev_investor_spread),
            "expansion": (trader_spread > prev_trader_spread) & (investor_spread > prev_investor_spread),
            "bullish": trader.min(axis=1, skipna=False) > investor.max(axis=1, skipna=False),
            "bearish": trader.max(axis=1, skipna=False) < investor.min(axis=1, skipna=False),
        },
        index=trader.index,
    )
    out.iloc[:1] = False
    return out
