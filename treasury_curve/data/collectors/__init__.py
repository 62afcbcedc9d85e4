from .treasury_collector import TreasuryCollector

__all__ = ["TreasuryCollector"]
