"""
Fixed GMMA domain constants.

Daryl Guppy's two EMA bundles are part of the indicator's definition, so they
live here as constants rather than as caller parameters.
"""

# Short-term ("trader") bundle
TRADER_PERIODS = (3, 5, 8, 10, 12, 15)

# Long-term ("investor") bundle
INVESTOR_PERIODS = (30, 35, 40, 45, 50, 60)

# Column prefixes: s3..s15 for traders, l30..l60 for investors
TRADER_PREFIX = "s"
INVESTOR_PREFIX = "l"

# Shortest price series compute_gmma accepts
MIN_PRICES = 3

# Warm-up placeholder for EMA bars before the period is filled.
# Numeric zero means "not yet computable", not a price of 0.
SENTINEL = 0.0
