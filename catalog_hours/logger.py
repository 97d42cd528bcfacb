import logging
import os
import time
from functools import wraps
from typing import Any, Awaitable, Callable

from catalog_hours.config import LOG_FILE

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(log_file: str = LOG_FILE) -> None:
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    if any(
        isinstance(handler, logging.FileHandler)
        and handler.baseFilename == os.path.abspath(log_file)
        for handler in logger.handlers
    ):
        return

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)


def log_time(func: Callable[..., Awaitable[Any]]) -> Callable[..., Any]:
    """Log how long an async page operation took for the given url.

    The wrapped callable is a method whose first argument after ``self``
    is the url.
    """
    @wraps(func)
    async def wrapper(instance: Any, url: str, *args: Any, **kwargs: Any) -> Any:
        start_time = time.time()
        result = await func(instance, url, *args, **kwargs)
        elapsed_time = time.time() - start_time
        logging.info(
            f"Time taken by {func.__name__} "
            f"for {url}: {elapsed_time:.2f} seconds"
        )
        return result

    return wrapper
