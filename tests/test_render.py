import pytest

from emojisheet.render import header_anchor, render_cheat_sheet, render_table


@pytest.mark.parametrize("header,anchor", [
    ("Table of Contents", "table-of-contents"),
    ("Smileys & Emotion", "smileys--emotion"),
    ("GitHub Custom Emoji", "github-custom-emoji"),
    ("Face-Smiling", "face-smiling"),
    ("Café (new)", "caf-new"),
])
def test_header_anchor(header, anchor):
    assert header_anchor(header) == anchor


def test_table_with_aliases_and_filler():
    lines = render_table([["a"], ["b", "b2"], ["c"]], 2, "L", "R")
    assert lines == [
        "| | ico | shortcode | ico | shortcode | |",
        "| - | :-: | - | :-: | - | - |",
        "| L | :a: | `:a:` | :b: | `:b:` <br /> `:b2:` | R |",
        "| L | :c: | `:c:` | | | R |",
    ]


def test_table_narrower_than_columns():
    assert render_table([["octocat"]], 3, "L", "R") == [
        "| | ico | shortcode | |",
        "| - | :-: | - | - |",
        "| L | :octocat: | `:octocat:` | R |",
    ]


def test_cheat_sheet():
    categorized = {
        "Smileys & Emotion": {
            "Face Smiling": [["grinning"], ["smiley"]],
            "Face Affection": [["heart_eyes"]],
        },
        "GitHub Custom Emoji": {"": [["octocat"]]},
    }
    document = render_cheat_sheet(categorized, "emojisheet")
    assert document.split("\n") == [
        "# emojisheet",
        "",
        "",
        "This cheat sheet is automatically generated from "
        "[GitHub Emoji API](https://api.github.com/emojis) and "
        "[Unicode Full Emoji List](https://unicode.org/emoji/charts/full-emoji-list.html).",
        "",
        "## Table of Contents",
        "",
        "- [Smileys & Emotion](#smileys--emotion)",
        "- [GitHub Custom Emoji](#github-custom-emoji)",
        "",
        "### Smileys & Emotion",
        "",
        "- [Face Smiling](#face-smiling)",
        "- [Face Affection](#face-affection)",
        "",
        "#### Face Smiling",
        "",
        "| | ico | shortcode | ico | shortcode | |",
        "| - | :-: | - | :-: | - | - |",
        "| [top](#smileys--emotion) | :grinning: | `:grinning:` | :smiley: | `:smiley:` "
        "| [top](#table-of-contents) |",
        "",
        "#### Face Affection",
        "",
        "| | ico | shortcode | |",
        "| - | :-: | - | - |",
        "| [top](#smileys--emotion) | :heart_eyes: | `:heart_eyes:` | [top](#table-of-contents) |",
        "",
        "### GitHub Custom Emoji",
        "",
        "| | ico | shortcode | |",
        "| - | :-: | - | - |",
        "| [top](#github-custom-emoji) | :octocat: | `:octocat:` | [top](#table-of-contents) |",
        "",
    ]


def test_custom_names_and_links():
    document = render_cheat_sheet({}, "Emoji", toc_name="Contents", shortcodes_name="A",
                                  shortcodes_url="https://a.example", chart_name="B",
                                  chart_url="https://b.example")
    assert document == ("# Emoji\n\n\n"
                        "This cheat sheet is automatically generated from "
                        "[A](https://a.example) and [B](https://b.example).\n\n"
                        "## Contents\n\n")
