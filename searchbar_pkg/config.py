"""Centralized configuration for the search bar.

This module defines:
- Numeric formatting of arithmetic previews
- Input length limit
- Protocols considered safe to navigate to
- The built-in search engines and the default one

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with SEARCHBAR_)
"""

import os

from .types import SearchEngine

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("searchbar")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Result formatting
ROUND_SIGNIFICANT_DIGITS = int(
    os.getenv("SEARCHBAR_ROUND_SIGNIFICANT_DIGITS", "12")
)  # absorbs binary floating-point noise
MAX_FRACTION_DIGITS = int(os.getenv("SEARCHBAR_MAX_FRACTION_DIGITS", "10"))
EXPONENT_THRESHOLD = 1e21  # integers at or above this render in exponent form

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("SEARCHBAR_MAX_INPUT_LENGTH", "10000"))  # characters

# Navigation
SAFE_PROTOCOLS = frozenset(
    p.strip().lower()
    for p in os.getenv("SEARCHBAR_SAFE_PROTOCOLS", "http,https,ftp,ftps").split(",")
    if p.strip()
)
PORT_MIN_DIGITS = 2
PORT_MAX_DIGITS = 5

SEARCH_ENGINES = {
    "g": SearchEngine("g", "Google", "https://www.google.com/search", "q"),
    "b": SearchEngine("b", "Baidu", "https://www.baidu.com/s", "wd"),
    "bi": SearchEngine("bi", "Bing", "https://www.bing.com/search", "q"),
    "gh": SearchEngine("gh", "GitHub", "https://github.com/search", "q"),
    "v": SearchEngine("v", "Bilibili", "https://search.bilibili.com/all", "keyword"),
    "z": SearchEngine("z", "Zhihu", "https://www.zhihu.com/search", "q"),
    "y": SearchEngine("y", "YouTube", "https://www.youtube.com/results", "search_query"),
}

DEFAULT_ENGINE = os.getenv("SEARCHBAR_DEFAULT_ENGINE", "g").strip().lower()
if DEFAULT_ENGINE not in SEARCH_ENGINES:
    DEFAULT_ENGINE = "g"
