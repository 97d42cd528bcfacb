import asyncio
import logging
from typing import Optional

import aiohttp

from catalog_hours.exceptions import TransportError
from catalog_hours.logger import log_time


class PageFetcher:
    """Retrieve pages as UTF-8 text over a single aiohttp session.

    Every call goes out immediately: there is no concurrency limit and
    no retry. Without an explicit ``timeout`` aiohttp's default one applies.
    The session only exists inside ``async with``.

    Example:
        async with PageFetcher() as fetcher:
            html = await fetcher.fetch("https://www.raywenderlich.com/ios/paths")
    """

    def __init__(self, timeout: Optional[aiohttp.ClientTimeout] = None) -> None:
        self.timeout = timeout
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "PageFetcher":
        if self.timeout is None:
            self.session = aiohttp.ClientSession()
        else:
            self.session = aiohttp.ClientSession(timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self.session:
            await self.session.close()
            self.session = None

    @log_time
    async def fetch(self, url: str) -> str:
        if not self.session:
            raise RuntimeError(
                "PageFetcher.fetch called outside 'async with PageFetcher()'"
            )

        try:
            async with self.session.get(url) as response:
                if response.status >= 400:
                    logging.warning(
                        f"Page {url} answered with status code "
                        f"{response.status}"
                    )
                raw_data = await response.read()
        except asyncio.TimeoutError as e:
            logging.error(f"Timed out fetching {url}")
            raise TransportError(url, "request timed out") from e
        except aiohttp.ClientError as e:
            logging.error(f"Failed to fetch {url}: {e}")
            raise TransportError(url, str(e)) from e

        try:
            return raw_data.decode("utf-8")
        except UnicodeDecodeError as e:
            logging.error(f"Page {url} is not valid UTF-8")
            raise TransportError(url, "body is not valid UTF-8") from e
