"""
Tests for the SMA-seeded EMA engine.
"""
import pytest
import pandas as pd
import numpy as np
from guppy.indicators.trend.ema import EMA, compute_ema


@pytest.fixture
def sample_prices():
    """Random-walk prices, reproducible."""
    rng = np.random.default_rng(7)
    return pd.Series(100 + rng.standard_normal(120).cumsum())


@pytest.fixture
def ramp():
    return [10, 11, 12, 13, 14, 15, 16, 17, 18, 19, 20]


class TestWarmUp:
    """Bars before the period is filled."""

    @pytest.mark.parametrize("period", [3, 5, 15, 60])
    def test_placeholders_are_exactly_zero(self, sample_prices, period):
        ema = compute_ema(sample_prices, period)
        assert (ema.iloc[:period - 1] == 0).all()

    def test_short_series_is_all_placeholder(self):
        ema = compute_ema([1.0, 2.0], 5)
        assert ema.tolist() == [0.0, 0.0]

    def test_nan_fill_value(self, sample_prices):
        ema = compute_ema(sample_prices, 10, fill_value=np.nan)
        assert ema.iloc[:9].isna().all()
        assert ema.iloc[9:].notna().all()


class TestSeedAndRecurrence:
    """Seeding with the SMA and the recursive step."""

    @pytest.mark.parametrize("period", [3, 5, 15, 60])
    def test_seed_equals_sma(self, sample_prices, period):
        ema = compute_ema(sample_prices, period)
        assert ema.iloc[period - 1] == pytest.approx(sample_prices.iloc[:period].mean())

    def test_recurrence_step(self, sample_prices):
        period = 8
        multiplier = 2 / (period + 1)
        ema = compute_ema(sample_prices, period)
        for i in range(period, len(sample_prices)):
            expected = (sample_prices.iloc[i] - ema.iloc[i - 1]) * multiplier + ema.iloc[i - 1]
            assert ema.iloc[i] == expected

    @pytest.mark.parametrize("period", [3, 12, 45])
    def test_bounded_by_price_and_previous_ema(self, sample_prices, period):
        """Each step is a convex combination of the price and the previous EMA."""
        ema = compute_ema(sample_prices, period)
        for i in range(period, len(sample_prices)):
            lo = min(sample_prices.iloc[i], ema.iloc[i - 1])
            hi = max(sample_prices.iloc[i], ema.iloc[i - 1])
            assert lo - 1e-9 <= ema.iloc[i] <= hi + 1e-9

    def test_ramp_period_3(self, ramp):
        ema = compute_ema(ramp, 3)
        assert ema.tolist() == [0, 0, 11, 12, 13, 14, 15, 16, 17, 18, 19]


class TestShape:
    """Output alignment."""

    def test_length_matches_input(self, sample_prices):
        assert len(compute_ema(sample_prices, 30)) == len(sample_prices)

    def test_keeps_series_index(self):
        dates = pd.date_range('2024-01-01', periods=6, freq='D')
        prices = pd.Series([1, 2, 3, 4, 5, 6], index=dates)
        ema = compute_ema(prices, 3)
        assert ema.index.equals(dates)

    def test_name(self, ramp):
        assert compute_ema(ramp, 5).name == "EMA(5)"

    def test_plain_list_gets_range_index(self, ramp):
        ema = compute_ema(ramp, 3)
        assert ema.index.equals(pd.RangeIndex(len(ramp)))


class TestEMAIndicator:
    """EMA as a registry indicator over a DataFrame column."""

    def test_compute_matches_function(self, sample_prices):
        df = pd.DataFrame({"close": sample_prices})
        out = EMA(window=12).compute(df)
        pd.testing.assert_series_equal(out, compute_ema(sample_prices, 12))

    def test_custom_column(self, ramp):
        df = pd.DataFrame({"open": ramp})
        ind = EMA(window=3, column="open")
        assert ind.required_columns() == ["open"]
        assert ind.compute(df).iloc[2] == 11

    def test_rejects_non_positive_window(self):
        with pytest.raises(ValueError):
            EMA(window=0)


class TestPeriodValidation:

    @pytest.mark.parametrize("period", [0, -3])
    def test_rejects_non_positive_period(self, ramp, period):
        with pytest.raises(ValueError, match="period must be > 0"):
            compute_ema(ramp, period)

    def test_period_one_tracks_prices(self, ramp):
        assert compute_ema(ramp, 1).tolist() == [float(p) for p in ramp]
