#!/usr/bin/env python3

# ------------------------------------------------------------------------------------------
# --------------------- HTTP client for the RandomUser API ----------------------------------
# ------------------------------------------------------------------------------------------
import asyncio
from typing import Dict, List, Optional

import requests

from . import config
from .errors import FetchError


def fetch_users(timeout: Optional[float] = config.RANDOMUSER_TIMEOUT,
                url: Optional[str] = None) -> List[Dict]:
    # Returns the "results" array of the API payload exactly as received (a list of nested dicts).
    # Nothing is retried: any failure is raised to the caller as FetchError.
    url = url or config.API_URL

    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()  # 4xx/5xx fail fast
        data = resp.json()
    except requests.RequestException as exc:
        # requests' JSONDecodeError is a RequestException too, so bad bodies land here.
        raise FetchError(f"GET {url} failed: {exc}") from exc
    except ValueError as exc:
        raise FetchError(f"GET {url} returned a body that is not JSON") from exc

    if not isinstance(data, dict) or "results" not in data:
        raise FetchError(f"GET {url} returned JSON without a 'results' array")
    return data["results"]


async def fetch_users_async(timeout: Optional[float] = config.RANDOMUSER_TIMEOUT,
                            url: Optional[str] = None) -> List[Dict]:
    # The one suspension point: the blocking request runs in a worker thread.
    return await asyncio.to_thread(fetch_users, timeout, url)
