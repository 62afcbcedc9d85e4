"""US Treasury Data Collector - No API key required"""

import logging
from typing import Optional

import requests

from ...config import TreasuryCurveConfig
from ...errors import FetchFailure, InvalidYear
from ...utils.clock import SystemClock

logger = logging.getLogger(__name__)


class TreasuryCollector:
    """Download the yearly daily par yield curve CSV from the US Treasury"""

    def __init__(self, config: Optional[TreasuryCurveConfig] = None,
                 session: Optional[requests.Session] = None,
                 clock: Optional[SystemClock] = None):
        self.config = config or TreasuryCurveConfig()
        self.session = session or requests.Session()
        self.clock = clock or SystemClock()

    def check_year(self, year: int) -> None:
        """Raise InvalidYear unless min_year <= year <= current year"""
        current_year = self.clock.current_year()
        if year < self.config.min_year or year > current_year:
            raise InvalidYear(year, self.config.min_year, current_year)

    def treasury_url(self, year: int) -> str:
        self.check_year(year)
        return self.config.url_for(year)

    def fetch_year_csv(self, year: int) -> str:
        """
        Fetch one year of curve data as CSV text

        Raises:
            InvalidYear: year outside the published range, checked before any request
            FetchFailure: transport error, non-2xx status or a body that is not UTF-8
        """
        url = self.treasury_url(year)
        logger.info(f"Fetching Treasury yields for {year}")

        try:
            response = self.session.get(
                url,
                timeout=self.config.timeout,
                headers={"User-Agent": self.config.user_agent},
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchFailure(f"could not fetch Treasury curve data for {year}: {e}") from e

        try:
            text = response.content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise FetchFailure(f"Treasury response for {year} is not valid UTF-8") from e

        logger.debug(f"Received {len(text)} characters for {year}")
        return text
