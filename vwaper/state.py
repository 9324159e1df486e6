from vwaper.market.store import Market

# Global in-memory market for the running API process
market = Market()
