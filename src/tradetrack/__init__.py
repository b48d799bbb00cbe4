"""TradeTrack: trade ledger and weighted-average-cost portfolio accounting."""

__version__ = "0.1.0"
