from typing import Any, Optional, Tuple
import asyncio
import json
import logging

from aiohttp import ClientError, ClientSession
from mautrix.util.logging import TraceLogger
from yarl import URL

from ..errors import MalformedChartError, MalformedSourceError, TransportError

DEFAULT_USER_AGENT = "https://github.com/ikatyang/emoji-cheat-sheet"


class EmojiSourceClient:
    http: ClientSession
    log: TraceLogger
    shortcodes_url: URL
    chart_url: URL
    user_agent: str

    def __init__(self, http: ClientSession, shortcodes_url: URL, chart_url: URL,
                 user_agent: str = DEFAULT_USER_AGENT,
                 log: Optional[TraceLogger] = None) -> None:
        self.http = http
        self.shortcodes_url = shortcodes_url
        self.chart_url = chart_url
        self.user_agent = user_agent
        self.log = log or logging.getLogger("emojisheet.client")

    async def _get(self, url: URL, action: str) -> Tuple[bytes, str]:
        self.log.debug(f"Requesting {url} ({action})")
        headers = {"User-Agent": self.user_agent}
        try:
            async with self.http.get(url, headers=headers) as resp:
                body = await resp.read()
                if resp.status != 200:
                    self.log.warning(f"Got HTTP {resp.status} while {action}:\n%s",
                                     body.decode("utf-8", errors="replace"))
                    raise TransportError(f"Got HTTP {resp.status} while {action}")
                encoding = resp.get_encoding()
        except (ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Failed to connect while {action}: {e}") from e
        self.log.debug(f"Got {len(body)} bytes from {url}")
        return body, encoding

    async def get_shortcodes(self) -> Any:
        body, encoding = await self._get(self.shortcodes_url, "getting GitHub emoji shortcodes")
        try:
            return json.loads(body.decode(encoding))
        except (UnicodeDecodeError, LookupError) as e:
            raise MalformedSourceError("Got undecodable response while getting GitHub emoji "
                                       f"shortcodes: {e}") from e
        except json.JSONDecodeError as e:
            self.log.debug("Non-JSON shortcode response body:\n%s", body)
            raise MalformedSourceError("Got invalid JSON while getting GitHub emoji "
                                       f"shortcodes: {e}") from e

    async def get_chart(self) -> str:
        body, encoding = await self._get(self.chart_url, "getting Unicode emoji chart")
        try:
            return body.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise MalformedChartError("Got undecodable response while getting Unicode "
                                      f"emoji chart: {e}") from e

    async def get_sources(self) -> Tuple[Any, str]:
        tasks = [asyncio.ensure_future(self.get_shortcodes()),
                 asyncio.ensure_future(self.get_chart())]
        try:
            shortcodes, chart = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return shortcodes, chart
