"""
Query API for US Treasury par yield curves

Two ways to use it:
1) one-off lookups with fetch_latest() or fetch_date()
2) fetch_year() once, then query the returned CurveHistory directly

Each call fetches the year's CSV again; nothing is cached between calls.
"""

import logging
from datetime import date
from typing import Dict, Optional, Tuple

from .config import TreasuryCurveConfig
from .core.curve import CurveSnapshot
from .core.history import CurveHistory, build_history
from .data.collectors.treasury_collector import TreasuryCollector
from .utils.clock import SystemClock

logger = logging.getLogger(__name__)


class TreasuryCurveClient:
    """Fetches yearly CSVs and answers curve queries against them"""

    def __init__(self, collector: Optional[TreasuryCollector] = None,
                 clock: Optional[SystemClock] = None,
                 config: Optional[TreasuryCurveConfig] = None):
        """
        The collector owns the config and clock once one is given; passing a
        different config or clock alongside it raises ValueError.
        """
        if collector is not None:
            if config is not None and config != collector.config:
                raise ValueError("config differs from the collector's config; configure the collector instead")
            if clock is not None and clock is not collector.clock:
                raise ValueError("clock differs from the collector's clock; configure the collector instead")
            self.collector = collector
        else:
            self.collector = TreasuryCollector(config or TreasuryCurveConfig(), clock=clock or SystemClock())

    @property
    def config(self) -> TreasuryCurveConfig:
        return self.collector.config

    @property
    def clock(self) -> SystemClock:
        return self.collector.clock

    def fetch_year(self, year: int) -> CurveHistory:
        """Fetch and parse an entire year of Treasury curves"""
        csv_text = self.collector.fetch_year_csv(year)
        history = build_history(csv_text, max_forward_days=self.config.max_forward_days)
        logger.info(f"Loaded {len(history)} curves for {year}")
        return history

    def fetch_latest(self) -> Tuple[date, CurveSnapshot]:
        """Latest published curve of the current year"""
        return self.fetch_year(self.clock.current_year()).latest()

    def fetch_date(self, request_date: date) -> Tuple[date, CurveSnapshot]:
        """
        Curve for a specific date

        Weekends and holidays resolve to the last trading day before them.
        """
        return self.fetch_year(request_date.year).as_of(request_date)

    def fetch_years(self, start_year: int, end_year: int) -> Dict[int, CurveHistory]:
        """Fetch every year from start_year to end_year inclusive"""
        histories = {}
        for year in range(start_year, end_year + 1):
            histories[year] = self.fetch_year(year)
        return histories


_default_client: Optional[TreasuryCurveClient] = None


def default_client() -> TreasuryCurveClient:
    global _default_client
    if _default_client is None:
        _default_client = TreasuryCurveClient(config=TreasuryCurveConfig.from_env())
    return _default_client


def fetch_latest() -> Tuple[date, CurveSnapshot]:
    return default_client().fetch_latest()


def fetch_date(request_date: date) -> Tuple[date, CurveSnapshot]:
    return default_client().fetch_date(request_date)


def fetch_year(year: int) -> CurveHistory:
    return default_client().fetch_year(year)
