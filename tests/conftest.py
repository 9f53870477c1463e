from aioresponses import aioresponses
import pytest

EMOJI_BASE = "https://github.githubassets.com/images/icons/emoji"

SHORTCODES = {
    "+1": f"{EMOJI_BASE}/unicode/1f44d.png?v8",
    "grinning": f"{EMOJI_BASE}/unicode/1f600.png?v8",
    "octocat": f"{EMOJI_BASE}/octocat.png?v8",
    "one": f"{EMOJI_BASE}/unicode/0031-fe0f-20e3.png?v8",
    "smiley": f"{EMOJI_BASE}/unicode/1f603.png?v8",
    "thumbsup": f"{EMOJI_BASE}/unicode/1f44d.png?v8",
    "mystery": f"{EMOJI_BASE}/unicode/10ffff.png?v8",
    "shipit": f"{EMOJI_BASE}/shipit.png?v8",
    "squirrel": f"{EMOJI_BASE}/shipit.png?v8",
}

CHART_HTML = """<!DOCTYPE html>
<html>
<head><title>Full Emoji List, v15.1</title></head>
<body>
<h1>Full Emoji List, v15.1</h1>
<table border='1'>
<tr><th colspan='15' class='bighead'><a href='#smileys_&amp;_emotion' name='smileys_&amp;_emotion'>Smileys &amp; Emotion</a></th></tr>
<tr><th colspan='15' class='mediumhead'><a href='#face-smiling' name='face-smiling'>face-smiling</a></th></tr>
<tr><th class='rchars'>№</th><th class='center'>Code</th><th class='center'>Browser</th><th class='center'>CLDR Short Name</th></tr>
<tr><td class='rchars'>1</td><td class='code'><a href='#1f600' name='1f600'>U+1F600</a></td><td class='chars'>😀</td><td class='name'>grinning face</td></tr>
<tr><td class='rchars'>2</td><td class='code'><a href='#1f603' name='1f603'>U+1F603</a></td><td class='chars'>😃</td><td class='name'>grinning face with big eyes</td></tr>
<tr><th colspan='15' class='bighead'><a href='#people_&amp;_body' name='people_&amp;_body'>People &amp; Body</a></th></tr>
<tr><th colspan='15' class='mediumhead'><a href='#hand-fingers-closed' name='hand-fingers-closed'>hand-fingers-closed</a></th></tr>
<tr><th class='rchars'>№</th><th class='center'>Code</th><th class='center'>Browser</th><th class='center'>CLDR Short Name</th></tr>
<tr><td class='rchars'>3</td><td class='code'><a href='#1f44d' name='1f44d'>U+1F44D</a></td><td class='chars'>👍</td><td class='name'>thumbs up</td></tr>
<tr><td class='rchars'>4</td><td class='code'><a href='#1f44e' name='1f44e'>U+1F44E</a></td><td class='chars'>👎</td><td class='name'>thumbs down</td></tr>
<tr><th colspan='15' class='bighead'><a href='#symbols' name='symbols'>Symbols</a></th></tr>
<tr><th colspan='15' class='mediumhead'><a href='#keycap' name='keycap'>keycap</a></th></tr>
<tr><td class='rchars'>5</td><td class='code'><a href='#0031_fe0f_20e3' name='0031_fe0f_20e3'>U+0031 U+FE0F U+20E3</a></td><td class='chars'>1\ufe0f\u20e3</td><td class='name'>keycap: 1</td></tr>
</table>
</body>
</html>
"""


@pytest.fixture
def mock_http():
    with aioresponses() as mock:
        yield mock
