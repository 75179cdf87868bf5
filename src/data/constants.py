"""Fixed-point scales, protocol bounds and market identifiers."""

# Market symbols
USDC = "USDC"
WETH = "WETH"

# Ray (1e27) — fixed-point unit for rates and ratios
RAY = 10**27

# Widest intermediate product a fixed-point multiply may produce
MAX_UINT256 = 2**256 - 1

# 365.25-day year so leap years are accounted for
SECONDS_PER_YEAR = 31_557_600

# Compounding granularity cap for APR -> APY conversion
MAX_COMPOUNDING_PERIODS = 365

# Sanity ceiling for base rate and slopes (100x scale)
MAX_RATE = 100 * RAY

# Basis points
BPS_SCALE = 10_000
MAX_FEE_BPS = 10_000
