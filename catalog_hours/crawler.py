"""
Concurrent crawler that adds up the viewing time of a learning-path catalog.

The index page lists the learning paths. Every path page that is not
blacklisted is fetched and parsed in its own task, and the courses of all
pages are summed once every task has finished.
"""
import asyncio
import logging
from typing import AbstractSet, List, Protocol

from catalog_hours.config import (
    BASE_URL,
    CATALOG_NAME,
    COURSE_BLACKLIST,
    PATH_BLACKLIST,
    PATHS_PATH,
)
from catalog_hours.models import Course, CrawlResult
from catalog_hours.parsing import (
    extract_courses,
    extract_path_links,
    parse_document,
    resolve_url,
)


class Fetcher(Protocol):
    async def fetch(self, url: str) -> str:
        ...


class Crawler:
    def __init__(
        self,
        fetcher: Fetcher,
        base_url: str = BASE_URL,
        paths_path: str = PATHS_PATH,
        path_blacklist: AbstractSet[str] = PATH_BLACKLIST,
        course_blacklist: AbstractSet[str] = COURSE_BLACKLIST,
    ) -> None:
        self.fetcher = fetcher
        self.base_url = base_url
        self.paths_path = paths_path
        self.path_blacklist = frozenset(path_blacklist)
        self.course_blacklist = frozenset(course_blacklist)

    async def get_hours(self) -> CrawlResult:
        paths_url = resolve_url(self.base_url, self.paths_path)
        paths_page = await self.fetcher.fetch(paths_url)
        path_links = extract_path_links(
            parse_document(paths_page), self.base_url, self.path_blacklist
        )
        logging.info(f"Found {len(path_links)} learning paths")

        courses = await self.fetch_course_data(path_links)
        logging.info(f"Found {len(courses)} courses")

        return CrawlResult(courses=tuple(courses))

    async def fetch_course_data(self, urls: List[str]) -> List[Course]:
        """Fetch and parse every path page concurrently.

        Results are flattened in the order of ``urls``. The first failing
        task cancels the ones still running and its error is re-raised.
        """
        tasks = [
            asyncio.create_task(self.fetch_path_courses(url)) for url in urls
        ]

        try:
            pages = await asyncio.gather(*tasks)
        except Exception:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        return [course for page in pages for course in page]

    async def fetch_path_courses(self, url: str) -> List[Course]:
        path_page = await self.fetcher.fetch(url)
        courses = extract_courses(parse_document(path_page), self.base_url)
        logging.debug(f"Parsed {len(courses)} courses from {url}")
        return courses


def format_result(result: CrawlResult, catalog: str = CATALOG_NAME) -> str:
    hours, minutes = result.hours_minutes
    return (
        f"The total time to watch the {catalog} path is "
        f"{hours} hours and {minutes} minutes."
    )
