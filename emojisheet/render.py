from typing import Iterable, List, Sequence
import re

from .api.types import Categorized, IdGroup

anchor_strip_regex = re.compile(r"[^a-z0-9-]")


def header_anchor(header: str) -> str:
    """Get the fragment GitHub assigns to a Markdown header."""
    return anchor_strip_regex.sub("", header.lower().replace(" ", "-"))


def _toc(headers: Iterable[str]) -> List[str]:
    return [f"- [{header}](#{header_anchor(header)})" for header in headers]


def render_table(groups: Sequence[IdGroup], columns: int, left_text: str,
                 right_text: str) -> List[str]:
    used_columns = min(columns, len(groups))
    lines = ["| " + "| ico | shortcode " * used_columns + "| |",
             "| - " + "| :-: | - " * used_columns + "| - |"]
    for start in range(0, len(groups), columns):
        line = f"| {left_text} "
        for offset in range(columns):
            if start + offset < len(groups):
                primary, *aliases = groups[start + offset]
                line += f"| :{primary}: | `:{primary}:` "
                line += "".join(f"<br /> `:{alias}:` " for alias in aliases)
            elif len(groups) > columns:
                line += "| | "
        line += f"| {right_text} |"
        lines.append(line)
    return lines


def render_cheat_sheet(categorized: Categorized, title: str, columns: int = 2,
                       toc_name: str = "Table of Contents",
                       shortcodes_name: str = "GitHub Emoji API",
                       shortcodes_url: str = "https://api.github.com/emojis",
                       chart_name: str = "Unicode Full Emoji List",
                       chart_url: str = "https://unicode.org/emoji/charts/full-emoji-list.html"
                       ) -> str:
    lines = [f"# {title}", "", "",
             f"This cheat sheet is automatically generated from "
             f"[{shortcodes_name}]({shortcodes_url}) and [{chart_name}]({chart_url}).",
             "",
             f"## {toc_name}",
             "",
             *_toc(categorized.keys()),
             ""]
    top_of_toc = f"[top](#{header_anchor(toc_name)})"
    for category, subcategories in categorized.items():
        lines += [f"### {category}", ""]
        if len(subcategories) > 1:
            lines += [*_toc(subcategories.keys()), ""]
        top_of_category = f"[top](#{header_anchor(category)})"
        for subcategory, groups in subcategories.items():
            if subcategory:
                lines += [f"#### {subcategory}", ""]
            lines += render_table(groups, columns, top_of_category, top_of_toc)
            lines.append("")
    return "\n".join(lines)
