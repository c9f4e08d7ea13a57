"""benchledger -- normalize raw benchmark timings into a ledger and a report."""

__version__ = "0.1.0"
