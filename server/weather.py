"""
Weather proxy routes.

Forwards weather lookups to wttr.in (or whatever WEATHER_URL points at) so
the dashboard does not have to call the upstream service from the browser.

Date: 2026-10-19
"""

import asyncio
import logging
from urllib.parse import quote

import aiohttp
from fastapi import APIRouter, HTTPException

from logic.config import WEATHER_TIMEOUT, WEATHER_URL
from logic.errors import UpstreamError

_logger = logging.getLogger(__name__)

router = APIRouter()


async def fetch_weather(location: str) -> dict:
    """Fetch the current forecast for a location.

    Args:
        location: Place name, coordinates, or "auto" for the caller's IP.

    Returns:
        Parsed JSON from the upstream service.

    Raises:
        UpstreamError: On connection failure, timeout, non-200 status or a
            body that is not JSON.
    """
    url = WEATHER_URL.format(location=quote(location, safe=","))
    timeout = aiohttp.ClientTimeout(total=WEATHER_TIMEOUT)

    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url) as resp:
                if resp.status != 200:
                    raise UpstreamError(f"Weather service returned {resp.status}")
                return await resp.json(content_type=None)
    except UpstreamError:
        raise
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        raise UpstreamError("Weather service unavailable") from e


@router.get("/api/weather")
async def get_weather(location: str = "auto"):
    """Get weather for a location via the upstream weather service.

    Raises:
        HTTPException: 500 if the upstream call fails.
    """
    try:
        return await fetch_weather(location or "auto")
    except UpstreamError:
        _logger.exception("Weather lookup failed for %s", location)
        raise HTTPException(500, "Weather unavailable")
