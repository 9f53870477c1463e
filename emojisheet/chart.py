from typing import Iterator, Optional, Union

from bs4 import BeautifulSoup, SoupStrainer, Tag
from bs4.builder import ParserRejectedMarkup

from .api.types import BeginCategory, BeginSubcategory, ChartEvent, Row
from .errors import MalformedChartError


def title_case(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.replace("-", " ").split())


def _first_child_tag(row: Tag) -> Optional[Tag]:
    return next((child for child in row.children if isinstance(child, Tag)), None)


def _iter_events(soup: BeautifulSoup) -> Iterator[ChartEvent]:
    for row in soup.find_all("tr"):
        first = _first_child_tag(row)
        if first is None:
            continue
        if first.name == "th":
            classes = first.get("class") or []
            if "bighead" in classes:
                yield BeginCategory(title_case(first.get_text()))
            elif "mediumhead" in classes:
                yield BeginSubcategory(title_case(first.get_text()))
            continue
        chars = row.find(class_="chars")
        if chars is not None:
            yield Row(chars.get_text())


def parse_chart(html: Union[str, bytes]) -> Iterator[ChartEvent]:
    """Parse the Unicode emoji chart into a lazy stream of heading and row events.

    Only ``tr`` elements are kept from the markup. The returned iterator can be
    consumed once.
    """
    if not isinstance(html, (str, bytes)):
        raise MalformedChartError(f"Expected chart markup, got {type(html).__name__}")
    try:
        soup = BeautifulSoup(html, "html.parser", parse_only=SoupStrainer("tr"))
    except ParserRejectedMarkup as e:
        raise MalformedChartError(f"Failed to parse emoji chart: {e}") from e
    return _iter_events(soup)
