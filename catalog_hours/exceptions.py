class CatalogHoursError(Exception):
    pass


class InvalidURLError(CatalogHoursError):
    def __init__(self, base_url: str, href: str | None) -> None:
        super().__init__(
            f"Error building URL from base: {base_url}, path: {href!r}"
        )


class TransportError(CatalogHoursError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Error getting page: {url}, reason: {reason}")


class DurationParseError(CatalogHoursError):
    def __init__(self, metadata: str) -> None:
        super().__init__(f"Error parsing duration from: {metadata!r}")


class DocumentQueryError(CatalogHoursError):
    def __init__(self, selector: str, reason: str) -> None:
        super().__init__(
            f"Error querying document with: {selector!r}, reason: {reason}"
        )
