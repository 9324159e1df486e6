import unittest

from vwaper.market.store import Market
from vwaper.models.market import Record


class TestMarketStore(unittest.TestCase):
    def test_ingest_creates_then_updates(self):
        market = Market()
        market.ingest("VOD.L", 1, 80, 184.1, 182.4)
        agg = market.ingest("VOD.L", 2, 20, 185.0, 181.0)

        self.assertEqual(len(market), 1)
        self.assertIs(market.lookup("VOD.L"), agg)
        self.assertEqual(agg.total_volume, 100)
        self.assertEqual(agg.interval_volume, {1: 80, 2: 20})
        self.assertEqual(market.record_count, 2)

    def test_symbols_keep_first_seen_order(self):
        market = Market()
        for sym in ["C", "A", "C", "B", "A", "B", "C"]:
            market.ingest(sym, 1, 1, 1.0, 1.0)

        self.assertEqual(market.symbols_in_order(), ["C", "A", "B"])

    def test_symbols_in_order_is_a_copy(self):
        market = Market()
        market.ingest("A", 1, 1, 1.0, 1.0)
        market.symbols_in_order().append("Z")
        self.assertEqual(market.symbols_in_order(), ["A"])

    def test_max_interval_never_decreases(self):
        market = Market()
        seen = []
        for interval in [2, 5, 1, 3, 5, 4]:
            market.ingest("A", interval, 1, 1.0, 1.0)
            seen.append(market.max_interval_seen())

        self.assertEqual(seen, [2, 5, 5, 5, 5, 5])

    def test_max_interval_tracks_across_stocks(self):
        market = Market()
        market.ingest("A", 2, 1, 1.0, 1.0)
        market.ingest("B", 7, 1, 1.0, 1.0)
        self.assertEqual(market.max_interval_seen(), 7)

    def test_empty_market(self):
        market = Market()
        self.assertEqual(len(market), 0)
        self.assertEqual(market.max_interval_seen(), 0)
        self.assertEqual(market.symbols_in_order(), [])

    def test_lookup_unknown_symbol_warns_and_returns_none(self):
        market = Market()
        with self.assertLogs("market_store", level="WARNING") as cm:
            self.assertIsNone(market.lookup("NOPE"))
        self.assertTrue(any("NOPE" in line for line in cm.output))

    def test_duplicate_add_is_rejected_without_touching_state(self):
        market = Market()
        self.assertTrue(market.add("A", 1, 10, 5.0, 1.0))

        with self.assertLogs("market_store", level="WARNING"):
            self.assertFalse(market.add("A", 9, 99, 50.0, 0.5))

        agg = market.lookup("A")
        self.assertEqual(agg.total_volume, 10)
        self.assertEqual(agg.interval_volume, {1: 10})
        self.assertEqual(market.symbols_in_order(), ["A"])
        self.assertEqual(market.max_interval_seen(), 1)

    def test_update_unknown_symbol_is_rejected(self):
        market = Market()
        with self.assertLogs("market_store", level="ERROR"):
            self.assertFalse(market.update("A", 1, 10, 5.0, 1.0))
        self.assertFalse(market.contains("A"))
        self.assertEqual(market.max_interval_seen(), 0)

    def test_ingest_record(self):
        market = Market()
        market.ingest_record(Record("BT.LN", 2, 75, 449.8, 448.2))
        self.assertTrue(market.contains("BT.LN"))
        self.assertEqual(market.max_interval_seen(), 2)

    def test_volume_conservation_after_every_ingest(self):
        market = Market()
        rows = [("A", 1, 3), ("B", 2, 4), ("A", 3, 5), ("A", 1, 6), ("B", 1, 0)]
        for sym, interval, volume in rows:
            market.ingest(sym, interval, volume, 1.0, 1.0)
            for s in market.symbols_in_order():
                agg = market.lookup(s)
                self.assertEqual(agg.total_volume, sum(agg.interval_volume.values()))

    def test_reset(self):
        market = Market()
        market.ingest("A", 4, 1, 1.0, 1.0)
        market.reset()
        self.assertEqual(len(market), 0)
        self.assertEqual(market.max_interval_seen(), 0)
        self.assertEqual(market.record_count, 0)


if __name__ == "__main__":
    unittest.main()
