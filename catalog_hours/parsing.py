import logging
from typing import AbstractSet, List
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from catalog_hours.config import (
    LEARNING_PATH_SELECTOR,
    LINK_SELECTOR,
    METADATA_SELECTOR,
    OVERLAY_LINK_SELECTOR,
    TITLE_SELECTOR,
    TUTORIAL_ITEM_SELECTOR,
)
from catalog_hours.duration import parse_course_duration
from catalog_hours.exceptions import DocumentQueryError, InvalidURLError
from catalog_hours.models import Course


def parse_document(content: str) -> BeautifulSoup:
    return BeautifulSoup(content, "html.parser")


def select(node: Tag, selector: str) -> List[Tag]:
    try:
        return node.select(selector)
    except SelectorSyntaxError as e:
        raise DocumentQueryError(selector, str(e)) from e


def select_one(node: Tag, selector: str) -> Tag | None:
    found = select(node, selector)
    return found[0] if found else None


def read_href(node: Tag, selector: str) -> str | None:
    link = select_one(node, selector)
    if link is None:
        return None
    return link.get("href")


def resolve_url(base_url: str, href: str | None) -> str:
    if href is None:
        raise InvalidURLError(base_url, href)

    try:
        url = urljoin(base_url, href)
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidURLError(base_url, href) from e

    if not parsed.scheme or not parsed.netloc:
        raise InvalidURLError(base_url, href)

    return url


def last_path_segment(href: str) -> str:
    segments = [
        segment for segment in urlparse(href).path.split("/") if segment
    ]
    return segments[-1] if segments else ""


def extract_path_links(
    document: Tag,
    base_url: str,
    blacklist: AbstractSet[str],
) -> List[str]:
    path_links = []

    for element in select(document, LEARNING_PATH_SELECTOR):
        href = read_href(element, OVERLAY_LINK_SELECTOR)

        if href is not None and last_path_segment(href) in blacklist:
            logging.debug(f"Skipping blacklisted path: {href}")
            continue

        path_links.append(resolve_url(base_url, href))

    return path_links


def extract_courses(document: Tag, base_url: str) -> List[Course]:
    return [
        extract_course_from_item(item, base_url)
        for item in select(document, TUTORIAL_ITEM_SELECTOR)
    ]


def extract_course_from_item(item: Tag, base_url: str) -> Course:
    title = select_one(item, TITLE_SELECTOR)
    metadata = select_one(item, METADATA_SELECTOR)

    url = resolve_url(base_url, read_href(item, LINK_SELECTOR))
    name = title.decode_contents() if title else ""
    metadata_text = metadata.get_text() if metadata else ""

    return Course(
        name=name,
        duration=parse_course_duration(metadata_text),
        url=url,
    )
