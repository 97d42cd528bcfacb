import asyncio

import pytest

from catalog_hours.exceptions import TransportError

BASE_URL = "https://www.raywenderlich.com"
PATHS_URL = f"{BASE_URL}/ios/paths"


def learning_path_item(href: str, title: str = "Learning path") -> str:
    return (
        '<div class="c-tutorial-item c-tutorial-item--learning-path">'
        f'<a class="c-tutorial-item__overlay" href="{href}"></a>'
        f'<span class="c-tutorial-item__title">{title}</span>'
        "</div>"
    )


def course_item(href: str, title: str, metadata: str) -> str:
    return (
        '<div class="c-tutorial-item">'
        f'<a class="c-tutorial-item__overlay" href="{href}"></a>'
        f'<h3 class="c-tutorial-item__title">{title}</h3>'
        f'<div class="c-tutorial-item__metadata">Video Course {metadata}</div>'
        "</div>"
    )


def page(*items: str) -> str:
    return "<html><body><main>" + "".join(items) + "</main></body></html>"


class FakeFetcher:
    def __init__(self, pages, failing=(), slow=()) -> None:
        self.pages = pages
        self.failing = set(failing)
        self.slow = set(slow)
        self.requested = []
        self.completed = []

    async def fetch(self, url: str) -> str:
        self.requested.append(url)
        await asyncio.sleep(0)

        if url in self.failing:
            raise TransportError(url, "connection refused")
        if url in self.slow:
            await asyncio.sleep(10)

        self.completed.append(url)
        return self.pages[url]


@pytest.fixture
def catalog_pages():
    return {
        PATHS_URL: page(
            learning_path_item("/ios/paths/learn", "Start here"),
            learning_path_item("/ios/paths/concurrency", "Concurrency"),
            learning_path_item("/ios/paths/uikit/", "UIKit"),
            learning_path_item("/ios/paths/swiftui", "SwiftUI"),
        ),
        f"{BASE_URL}/ios/paths/concurrency": page(
            course_item(
                "/ios/courses/1-async-await",
                "Modern <em>Concurrency</em>",
                "(30 min)",
            ),
        ),
        f"{BASE_URL}/ios/paths/swiftui": page(
            course_item(
                "/ios/courses/2-swiftui-layout",
                "SwiftUI Layout",
                "(1 hr, 30 min)",
            ),
        ),
    }
