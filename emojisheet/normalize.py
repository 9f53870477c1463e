import unicodedata

import regex

grapheme_regex = regex.compile(r"\X")


def _is_spacing_mark(char: str) -> bool:
    return unicodedata.category(char) == "Mc"


def normalize_key(text: str) -> str:
    """Build the join key for a glyph.

    The chart renders some emoji with trailing spacing combining marks that GitHub's
    codepoint list leaves out, so every grapheme cluster made only of such marks is
    dropped. Everything else is kept as-is.
    """
    return "".join(cluster for cluster in grapheme_regex.findall(text)
                   if not all(_is_spacing_mark(char) for char in cluster))
