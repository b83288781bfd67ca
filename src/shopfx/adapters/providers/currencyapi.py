# src/shopfx/adapters/providers/currencyapi.py
"""
currencyapi.com Provider for Exchange Rate Tables

This module implements the HTTP client for the latest-rates endpoint. The
response carries every currency the service knows about, all relative to its
own base; only the allowed storefront currencies are kept.

Expected payload:
    {"data": {"EUR": {"code": "EUR", "value": 0.92}, ...},
     "meta": {"last_updated_at": "..."}}

Files that USE this module:
- shopfx.adapters.providers.registry (make_rate_source builds CurrencyApiSource)
- tests.test_providers (unit tests)

Files that this module USES:
- shopfx.adapters.providers.base (RateSource interface)
- shopfx.config (settings for API URL, key and timeout)
- shopfx.shared.validators (is_finite_number for rate values)
"""
import logging
from typing import Any, Dict, Optional

import requests

from shopfx.adapters.providers.base import RateSource
from shopfx.config import settings
from shopfx.domain.errors import RateSourceError
from shopfx.domain.models import ALLOWED_CURRENCIES, CurrencyCode
from shopfx.shared.validators import is_finite_number

log = logging.getLogger(__name__)


def parse_rate_payload(data: Any) -> Dict[CurrencyCode, float]:
    """
    Extract the allowed currencies from a rate payload.

    Codes absent from the payload, or carrying a missing, non-numeric,
    non-finite or non-positive value, are omitted.

    Args:
        data: Decoded JSON response

    Returns:
        Mapping of CurrencyCode -> exchange value (possibly empty)

    Raises:
        RateSourceError: If the payload has no 'data' object
    """
    if not isinstance(data, dict):
        log.error("Rates API unexpected response type: %r", type(data))
        raise RateSourceError("Rates API returned non-dict JSON")

    entries = data.get("data")
    if not isinstance(entries, dict):
        log.error("Rates API missing 'data' field")
        raise RateSourceError("Rates API response missing 'data' field")

    table: Dict[CurrencyCode, float] = {}
    for code in ALLOWED_CURRENCIES:
        entry = entries.get(code.value)
        if not isinstance(entry, dict):
            log.debug("Rates API response has no entry for %s", code.value)
            continue
        value = entry.get("value")
        if not is_finite_number(value) or value <= 0:
            log.warning("Rates API returned unusable value for %s: %r", code.value, value)
            continue
        table[code] = float(value)
    return table


class CurrencyApiSource(RateSource):
    name = "currencyapi"

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize currencyapi.com client.

        Args:
            base_url: Optional custom API URL (defaults to settings.rates_api_url)
            api_key: Optional API key (defaults to settings.rates_api_key)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.url = base_url or settings.rates_api_url
        self.api_key = settings.rates_api_key if api_key is None else api_key
        self.timeout = timeout or settings.http_timeout_seconds

    def fetch_rates(self) -> Dict[CurrencyCode, float]:
        """
        Fetch the latest rate table.

        Returns:
            Mapping of allowed CurrencyCode -> exchange value

        Raises:
            RateSourceError: On missing key, timeout, HTTP/network error,
                             invalid JSON or unexpected payload shape
        """
        if not self.api_key:
            raise RateSourceError("Rates API key not configured (RATES_API_KEY)")

        try:
            log.info("Fetching fresh rate table from %s", self.url)
            resp = requests.get(self.url, params={"apikey": self.api_key}, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            log.warning("Rates API timeout after %d seconds", self.timeout)
            raise RateSourceError(f"Rates API timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            log.warning("Rates API request failed: %s", e)
            raise RateSourceError(f"Rates API request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            log.error("Rates API returned invalid JSON: %s", e)
            raise RateSourceError(f"Rates API returned invalid JSON: {e}") from e

        table = parse_rate_payload(data)
        log.info("Rates API table received: %s", {c.value: v for c, v in table.items()})
        return table
