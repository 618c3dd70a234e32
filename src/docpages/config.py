"""Local configuration for docpages."""

from __future__ import annotations

import os


DEFAULT_DESCRIPTION_CAPACITY = "single-node"
DEFAULT_PAGE_TITLE = "Untitled"
DEFAULT_MIN_PUBLISH_CONTENT_LENGTH = 200
DEFAULT_MIN_RECOMMENDED_PAGES = 2

DEFAULT_HIGHLIGHT_COLOR = "#fef08a"
EMPTY_SECTION_HTML = "<p></p>"

# Nodes nested deeper than this keep only the text of their subtree.
MAX_NODE_DEPTH = 64

# How much leading content may be folded into the untitled description section.
DOCPAGES_DESCRIPTION_CAPACITY = os.getenv("DOCPAGES_DESCRIPTION_CAPACITY", DEFAULT_DESCRIPTION_CAPACITY)
DOCPAGES_DEFAULT_PAGE_TITLE = os.getenv("DOCPAGES_DEFAULT_PAGE_TITLE", DEFAULT_PAGE_TITLE)
DOCPAGES_MIN_PUBLISH_CONTENT_LENGTH = int(
    os.getenv("DOCPAGES_MIN_PUBLISH_CONTENT_LENGTH", str(DEFAULT_MIN_PUBLISH_CONTENT_LENGTH))
)
DOCPAGES_MIN_RECOMMENDED_PAGES = int(os.getenv("DOCPAGES_MIN_RECOMMENDED_PAGES", str(DEFAULT_MIN_RECOMMENDED_PAGES)))
