from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Any

from flask import current_app

from app.crm.config import API_ENDPOINT_VARS, ConfigurationMissing

logger = logging.getLogger(__name__)


class CustomerApiError(RuntimeError):
    pass


class FetchFailed(CustomerApiError):
    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


@dataclass(frozen=True)
class CustomerApiClient:
    base_url: str

    def url_for(self, path: str, params: dict[str, Any] | None = None) -> str:
        url = self.base_url.rstrip("/") + path
        if params:
            url += "?" + urllib.parse.urlencode({k: v for k, v in params.items() if v is not None})
        return url

    def request_json(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        """Single GET, no retries. Non-2xx and transport errors raise FetchFailed."""
        url = self.url_for(path, params)
        logger.info("GET %s", url)
        try:
            req = urllib.request.Request(url, method="GET")
            req.add_header("Accept", "application/json")
            with urllib.request.urlopen(req) as resp:
                status = getattr(resp, "status", 200)
                if not 200 <= status < 300:
                    raise FetchFailed(f"Failed to fetch customer (HTTP {status})", status=status)
                raw = resp.read()
        except urllib.error.HTTPError as e:
            logger.warning("Customer API returned HTTP %s for %s", e.code, url)
            raise FetchFailed(f"Failed to fetch customer (HTTP {e.code})", status=e.code) from e
        except urllib.error.URLError as e:
            logger.warning("Customer API unreachable (%s): %s", url, e.reason)
            raise FetchFailed(f"Failed to fetch customer: {e.reason}") from e
        except (OSError, http.client.HTTPException, ValueError) as e:
            logger.warning("Customer API request failed (%s): %s", url, e)
            raise FetchFailed(f"Failed to fetch customer: {e}") from e

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CustomerApiError(f"Invalid JSON from customer API ({path})") from e

    def fetch_customer(self, customer_id: str) -> Any:
        if not customer_id:
            raise ValueError("customer_id is required")
        return self.request_json("/customers", params={"customer_id": customer_id})


def client_from_config(config) -> CustomerApiClient:
    base_url = (config.get("API_ENDPOINT") or "").strip()
    if not base_url:
        raise ConfigurationMissing(f"{API_ENDPOINT_VARS[0]} is not defined")
    return CustomerApiClient(base_url=base_url)


def fetch_customer(customer_id: str, *, base_url: str | None = None) -> Any:
    config = current_app.config if base_url is None else {"API_ENDPOINT": base_url}
    return client_from_config(config).fetch_customer(customer_id)
