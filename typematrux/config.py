"""Shared client constants.

Centralizes the base URL and transport defaults so requests and executors
stay free of site-specific literals.
"""

from __future__ import annotations

__version__ = "0.2.0"

# Every endpoint hangs off this root
DEFAULT_BASE_URL = "https://drukarnia.com.ua/"

USER_AGENT = f"typematrux/{__version__}"

# Total request timeout in seconds
DEFAULT_TIMEOUT = 30.0

# Replies can be fetched without knowing the article; the site accepts an all-zero id
NIL_ARTICLE_ID = "0" * 24
