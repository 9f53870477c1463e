from typing import Dict, Iterable, List, Mapping, Optional, Set
import logging

from mautrix.util.logging import TraceLogger

from .api.types import (BeginCategory, BeginSubcategory, Categorized, ChartEvent,
                        ClassifiedLiteral, CustomLiteral, EmojiID, IdGroup, Row, Subcategories,
                        UnicodeLiteral)
from .errors import MalformedChartError
from .normalize import normalize_key

CUSTOM_CATEGORY = "GitHub Custom Emoji"


def collect_custom(custom_to_ids: Mapping[str, List[EmojiID]]) -> Optional[Subcategories]:
    """Put all GitHub-only emoji into one unnamed subcategory, or return ``None`` if
    there aren't any."""
    if not custom_to_ids:
        return None
    return {"": [list(ids) for ids in custom_to_ids.values()]}


class Categorizer:
    log: TraceLogger
    key_to_ids: Dict[str, List[EmojiID]]
    custom_to_ids: Dict[str, List[EmojiID]]
    _matched_keys: Set[str]

    def __init__(self, literals: Mapping[EmojiID, ClassifiedLiteral],
                 log: Optional[TraceLogger] = None) -> None:
        self.log = log or logging.getLogger("emojisheet.categorizer")
        self.key_to_ids = {}
        self.custom_to_ids = {}
        self._matched_keys = set()
        for emoji_id, literal in literals.items():
            if isinstance(literal, UnicodeLiteral):
                key = normalize_key(literal.text)
                self.key_to_ids.setdefault(key, []).append(emoji_id)
            elif isinstance(literal, CustomLiteral):
                self.custom_to_ids.setdefault(literal.name, []).append(emoji_id)
            else:
                raise TypeError(f"Unexpected literal {literal!r} for {emoji_id}")

    @property
    def unmatched_ids(self) -> List[EmojiID]:
        """Unicode shortcodes that no chart row has matched so far."""
        return [emoji_id for key, ids in self.key_to_ids.items()
                if key not in self._matched_keys
                for emoji_id in ids]

    def categorize(self, events: Iterable[ChartEvent]) -> Categorized:
        categorized: Categorized = {}
        stack: List[str] = []
        for evt in events:
            if isinstance(evt, BeginCategory):
                stack = [evt.title]
                categorized.setdefault(evt.title, {})
            elif isinstance(evt, BeginSubcategory):
                if not stack:
                    raise MalformedChartError(f"Subcategory {evt.title!r} appeared "
                                              "before any category")
                del stack[1:]
                stack.append(evt.title)
                categorized[stack[0]].setdefault(evt.title, [])
            elif isinstance(evt, Row):
                self._add_row(categorized, stack, evt.glyph)

        custom = collect_custom(self.custom_to_ids)
        if custom is not None:
            categorized.pop(CUSTOM_CATEGORY, None)
            categorized[CUSTOM_CATEGORY] = custom

        unmatched = self.unmatched_ids
        if unmatched:
            self.log.debug(f"Dropping {len(unmatched)} shortcodes that aren't in the chart: "
                           f"{', '.join(unmatched)}")
        return categorized

    def _add_row(self, categorized: Categorized, stack: List[str], glyph: str) -> None:
        if len(stack) < 2:
            self.log.trace(f"Skipping row {glyph!r} outside of a subcategory")
            return
        key = normalize_key(glyph)
        try:
            ids = self.key_to_ids[key]
        except KeyError:
            self.log.trace(f"No shortcode for {glyph!r} in {stack[0]} / {stack[1]}")
            return
        self._matched_keys.add(key)
        group: IdGroup = list(ids)
        categorized[stack[0]][stack[1]].append(group)


def categorize(literals: Mapping[EmojiID, ClassifiedLiteral],
               events: Iterable[ChartEvent]) -> Categorized:
    return Categorizer(literals).categorize(events)
