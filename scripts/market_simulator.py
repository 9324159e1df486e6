from __future__ import annotations

import random

from vwaper.market.store import Market
from vwaper.report.builder import build_report
from vwaper.report.render import render_lines


def run(symbols: tuple = ("VOD.L", "BT.LN", "BARC.L"), intervals: int = 8, records: int = 60) -> None:
    """
    Generates fake records and feeds them into a Market.

    - Each record picks a random stock and a random interval (out of order on purpose).
    - Price does a random walk per stock; high/low straddle it.
    - Some stocks will skip some intervals, which shows up as 0% rows.
    At the end we print the full report exactly like the CLI does.
    """
    market = Market()
    prices = {s: random.uniform(50.0, 500.0) for s in symbols}

    print(f"Simulating {records} records for {len(symbols)} stocks over {intervals} intervals...\n")

    for _ in range(records):
        symbol = random.choice(symbols)
        interval = random.randint(1, intervals)

        prices[symbol] += random.uniform(-1.0, 1.0)
        mid = round(prices[symbol], 2)
        spread = round(random.uniform(0.1, 2.0), 2)

        market.ingest(symbol, interval, random.randint(0, 500), mid + spread, mid - spread)

    for line in render_lines(build_report(market)):
        print(line)

    print(f"\nDone.")
    print(f"Stocks seen: {len(market)}")
    print(f"Max interval: {market.max_interval_seen()}")


if __name__ == "__main__":
    run()
