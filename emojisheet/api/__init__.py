from .client import EmojiSourceClient
from .types import (BeginCategory, BeginSubcategory, Categorized, ChartEvent, ClassifiedLiteral,
                    CustomLiteral, EmojiID, IdGroup, Row, Subcategories, UnicodeLiteral)

__all__ = ["EmojiSourceClient", "BeginCategory", "BeginSubcategory", "Categorized", "ChartEvent",
           "ClassifiedLiteral", "CustomLiteral", "EmojiID", "IdGroup", "Row", "Subcategories",
           "UnicodeLiteral"]
