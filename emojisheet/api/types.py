from typing import Dict, List, Tuple, Union

from attr import dataclass

EmojiID = str
IdGroup = List[EmojiID]
Subcategories = Dict[str, List[IdGroup]]
Categorized = Dict[str, Subcategories]


@dataclass(frozen=True)
class UnicodeLiteral:
    codepoints: Tuple[str, ...]

    @property
    def text(self) -> str:
        return "".join(self.codepoints)


@dataclass(frozen=True)
class CustomLiteral:
    name: str


ClassifiedLiteral = Union[UnicodeLiteral, CustomLiteral]


@dataclass(frozen=True)
class BeginCategory:
    title: str


@dataclass(frozen=True)
class BeginSubcategory:
    title: str


@dataclass(frozen=True)
class Row:
    glyph: str


ChartEvent = Union[BeginCategory, BeginSubcategory, Row]
