from typing import Any, Dict
import re

from yarl import URL

from .api.types import ClassifiedLiteral, CustomLiteral, UnicodeLiteral
from .errors import MalformedSourceError

MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)
hex_regex = re.compile(r"[0-9a-fA-F]+")


def _parse_codepoint(part: str, emoji_id: str) -> str:
    if not hex_regex.fullmatch(part):
        raise MalformedSourceError(f"Invalid hex codepoint {part!r}", emoji_id)
    value = int(part, 16)
    if value > MAX_CODEPOINT or value in SURROGATES:
        raise MalformedSourceError(f"{part!r} is not a Unicode scalar value", emoji_id)
    return chr(value)


def classify_url(emoji_id: str, url: str) -> ClassifiedLiteral:
    """Classify one GitHub emoji image URL.

    ``https://github.githubassets.com/images/icons/emoji/unicode/1f44d.png?v8`` is a
    Unicode emoji made of the codepoints in the file name, anything else (e.g.
    ``.../emoji/octocat.png?v8``) is a GitHub-only custom emoji.
    """
    if not isinstance(url, str):
        raise MalformedSourceError(f"Expected an image URL, got {type(url).__name__}", emoji_id)
    parsed = URL(url)
    stem = parsed.name
    if stem.endswith(".png"):
        stem = stem[:-len(".png")]
    parts = parsed.parts
    if len(parts) >= 2 and parts[-2] == "unicode":
        codepoints = tuple(_parse_codepoint(part, emoji_id) for part in stem.split("-"))
        return UnicodeLiteral(codepoints)
    if not stem:
        raise MalformedSourceError(f"Can't find emoji name in {url!r}", emoji_id)
    return CustomLiteral(stem)


def classify_shortcodes(data: Any) -> Dict[str, ClassifiedLiteral]:
    if not isinstance(data, dict):
        raise MalformedSourceError(f"Expected a JSON object of shortcodes, "
                                   f"got {type(data).__name__}")
    return {emoji_id: classify_url(emoji_id, url) for emoji_id, url in data.items()}
