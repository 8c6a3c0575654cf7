"""
Lenient JSON to strict JSON rewriting.

Turns JSON-like bytes carrying line and block comments, trailing commas and
bare object keys into standards-conformant JSON, ready for any strict decoder
such as the standard library json module or orjson.
"""

import logging

from laxjson._profile import HotPathStats
from laxjson._profile import clear_hot_path_stats
from laxjson._profile import get_hot_path_stats
from laxjson._rewriter import Container
from laxjson._rewriter import Rewriter
from laxjson._rewriter import RewriteState
from laxjson._rewriter import RewriteStats
from laxjson._rewriter import rewrite
from laxjson._rewriter import rewrite_text

__version__ = "0.1.0"

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Container",
    "HotPathStats",
    "RewriteState",
    "RewriteStats",
    "Rewriter",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "rewrite",
    "rewrite_text",
]
