import asyncio
import logging
import sys

from catalog_hours.crawler import Crawler, format_result
from catalog_hours.exceptions import CatalogHoursError
from catalog_hours.fetching import PageFetcher
from catalog_hours.logger import configure_logging
from catalog_hours.models import CrawlResult


async def crawl() -> CrawlResult:
    async with PageFetcher() as fetcher:
        return await Crawler(fetcher).get_hours()


def main() -> None:
    configure_logging()
    try:
        result = asyncio.run(crawl())
    except CatalogHoursError as e:
        logging.error(f"Failed to get the path duration: {e}")
        sys.exit(f"Could not get the path duration: {e}")
    else:
        print(format_result(result))


if __name__ == "__main__":
    main()
