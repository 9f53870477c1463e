from .categorizer import Categorizer, categorize
from .chart import parse_chart
from .errors import (ConfigError, EmojiSheetError, MalformedChartError, MalformedSourceError,
                     TransportError)
from .generator import CheatSheetGenerator, Config
from .normalize import normalize_key
from .render import render_cheat_sheet
from .shortcodes import classify_shortcodes

__version__ = "0.1.0"
__all__ = ["Categorizer", "categorize", "parse_chart", "ConfigError", "EmojiSheetError",
           "MalformedChartError", "MalformedSourceError", "TransportError",
           "CheatSheetGenerator", "Config", "normalize_key", "render_cheat_sheet",
           "classify_shortcodes"]
