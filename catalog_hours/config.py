import os

BASE_URL = "https://www.raywenderlich.com"
PATHS_PATH = "/ios/paths"
CATALOG_NAME = "Ray Wenderlich iOS"

LEARNING_PATH_SELECTOR = ".c-tutorial-item.c-tutorial-item--learning-path"
OVERLAY_LINK_SELECTOR = "a.c-tutorial-item__overlay"
TUTORIAL_ITEM_SELECTOR = ".c-tutorial-item"
TITLE_SELECTOR = ".c-tutorial-item__title"
METADATA_SELECTOR = ".c-tutorial-item__metadata"
LINK_SELECTOR = "a[href]"

PATH_BLACKLIST = frozenset({
    "learn",
    "uikit",
})
COURSE_BLACKLIST = frozenset({
    "4418-beginning-git",
    "4729-command-line-basics",
})

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
LOG_FILE = os.path.join(PROJECT_ROOT, "app.log")
