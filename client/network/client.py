"""
Purpose: Query the pathing server, with retry/back-off for robustness.
Dependencies: requests, time, logging, core/config.py (SERVER_URL).
Ext Hooks: Add authentication; keep a level id instead of resending cells.
Client Only: HTTP client with resilience.
"""

import logging
import time
from typing import Optional, Dict, Any, List

import requests

from core.config import SERVER_URL

logger = logging.getLogger(__name__)


class NetworkClient:
    def __init__(self, base_url: str = SERVER_URL, max_retries: int = 3, retry_delay: float = 1.0, backoff_factor: float = 2.0):
        self.base_url = base_url.rstrip('/')
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.backoff_factor = backoff_factor

    def post_with_retry(self, endpoint: str, data: Dict[str, Any], timeout: float = 5.0) -> Optional[Dict[str, Any]]:
        """Post with exponential backoff retry. 4xx responses are not retried."""
        url = f"{self.base_url}{endpoint}"
        delay = self.retry_delay
        for attempt in range(self.max_retries):
            try:
                response = requests.post(url, json=data, timeout=timeout)
                if response.status_code == 200:
                    return response.json()
                if 400 <= response.status_code < 500:
                    logger.error("Request to %s rejected (%s): %s", endpoint, response.status_code, response.text)
                    return None
                logger.warning("Server error %s on attempt %d", response.status_code, attempt + 1)
            except requests.exceptions.RequestException as e:
                logger.warning("Network error on attempt %d: %s", attempt + 1, e)

            if attempt < self.max_retries - 1:
                logger.info("Retrying in %s seconds...", delay)
                time.sleep(delay)
                delay *= self.backoff_factor
        return None


class PathClient(NetworkClient):
    """Typed wrappers around the level query routes."""

    def request_path(self, level: Dict[str, Any], start, goal, travel_order: bool = False) -> Optional[List[tuple]]:
        """
        Ask the server for a path.

        Args:
            level (dict): Level payload ({"cells": ...} or {"radius": ...}, optional "obstacles")
            start, goal: (q, r, h) coordinates
            travel_order (bool): Reverse the server's end->start order to start->end

        Returns:
            list: (q, r, h) tuples, or None when there is no path or the request failed
        """
        result = self.post_with_retry("/api/path", {"level": level, "start": list(start), "goal": list(goal)})
        if not result or result.get("path") is None:
            return None
        path = [tuple(c) for c in result["path"]]
        if travel_order:
            path.reverse()
        return path

    def request_reachable(self, level: Dict[str, Any], center, steps: int) -> Optional[set]:
        result = self.post_with_retry("/api/reachable", {"level": level, "center": list(center), "steps": steps})
        if not result:
            return None
        return {tuple(c) for c in result["cells"]}

    def request_neighbors(self, level: Dict[str, Any], cell, search_height: int = 1) -> Optional[set]:
        result = self.post_with_retry("/api/neighbors", {"level": level, "cell": list(cell), "search_height": search_height})
        if not result:
            return None
        return {tuple(c) for c in result["cells"]}

# Usage: client = PathClient(SERVER_URL)
# path = client.request_path({"radius": 3}, (0, 0, 0), (2, 0, 0), travel_order=True)
