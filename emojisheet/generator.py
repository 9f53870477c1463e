from typing import Optional, Union
from pathlib import Path
import logging
import tomllib

from aiohttp import ClientSession, ClientTimeout
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError
from yarl import URL

from mautrix.util.config import BaseFileConfig, ConfigUpdateHelper
from mautrix.util.logging import TraceLogger

from .api import Categorized, EmojiSourceClient
from .categorizer import Categorizer
from .chart import parse_chart
from .errors import ConfigError
from .render import render_cheat_sheet
from .shortcodes import classify_shortcodes


class Config(BaseFileConfig):
    """Cheat sheet settings, read from an optional user YAML file on top of the
    packaged ``base-config.yaml``. Only keys that exist in the base are kept."""

    sections = ("sources", "document", "logging")

    def __init__(self, path: Union[str, Path, None] = None) -> None:
        super().__init__(str(path) if path is not None else "",
                         "pkg://emojisheet/base-config.yaml")

    def load(self) -> None:
        if not self.path:
            self._data = CommentedMap()
            return
        try:
            super().load()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to read config file {self.path}: {e}") from e
        except YAMLError as e:
            raise ConfigError(f"Config file {self.path} is not valid YAML: {e}") from e
        if self._data is None:
            self._data = CommentedMap()
        elif not isinstance(self._data, dict):
            raise ConfigError(f"Config file {self.path} must contain a mapping")

    def do_update(self, helper: ConfigUpdateHelper) -> None:
        for section in self.sections:
            if section in self._data and not isinstance(self._data[section], dict):
                raise ConfigError(f"{section} must be a mapping in {self.path}")

        helper.copy("sources.shortcodes_url")
        helper.copy("sources.chart_url")
        helper.copy("sources.user_agent")
        helper.copy("sources.timeout")

        helper.copy("document.title")
        helper.copy("document.manifest")
        helper.copy("document.output")
        helper.copy("document.columns")
        helper.copy("document.toc_name")
        helper.copy("document.shortcodes_name")
        helper.copy("document.chart_name")

        helper.copy("logging.level")

    def load_and_update(self) -> None:
        self.load()
        self.update(save=False)
        self.validate()

    def validate(self) -> None:
        user_agent = self["sources.user_agent"]
        if not isinstance(user_agent, str) or not user_agent.strip():
            raise ConfigError("sources.user_agent must be a non-empty string")
        columns = self["document.columns"]
        if isinstance(columns, bool) or not isinstance(columns, int) or columns < 1:
            raise ConfigError("document.columns must be a positive integer")
        timeout = self["sources.timeout"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError("sources.timeout must be a positive number")
        level = self["logging.level"]
        if str(level).upper() not in logging.getLevelNamesMapping():
            raise ConfigError(f"Unknown logging level {level!r}")
        self["logging.level"] = str(level).upper()



def read_project_name(path: Union[str, Path]) -> str:
    try:
        with open(path, "rb") as file:
            manifest = tomllib.load(file)
    except OSError as e:
        raise ConfigError(f"Failed to read manifest {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Manifest {path} is not valid TOML: {e}") from e
    try:
        name = manifest["project"]["name"]
    except (KeyError, TypeError) as e:
        raise ConfigError(f"Manifest {path} doesn't have a [project] name") from e
    if not isinstance(name, str) or not name:
        raise ConfigError(f"Manifest {path} has an invalid project name")
    return name


class CheatSheetGenerator:
    config: Config
    log: TraceLogger

    def __init__(self, config: Config, log: Optional[TraceLogger] = None) -> None:
        self.config = config
        self.log = log or logging.getLogger("emojisheet")

    def get_title(self) -> str:
        title = self.config["document.title"]
        if title:
            return str(title)
        return read_project_name(self.config["document.manifest"])

    async def fetch_categorized(self) -> Categorized:
        timeout = ClientTimeout(total=self.config["sources.timeout"])
        async with ClientSession(timeout=timeout) as http:
            client = EmojiSourceClient(http, URL(self.config["sources.shortcodes_url"]),
                                       URL(self.config["sources.chart_url"]),
                                       user_agent=self.config["sources.user_agent"],
                                       log=self.log.getChild("client"))
            shortcodes, chart = await client.get_sources()

        literals = classify_shortcodes(shortcodes)
        categorizer = Categorizer(literals, log=self.log.getChild("categorizer"))
        categorized = categorizer.categorize(parse_chart(chart))
        group_count = sum(len(groups) for subcategories in categorized.values()
                          for groups in subcategories.values())
        self.log.info(f"Categorized {len(literals)} shortcodes into {group_count} emoji "
                      f"in {len(categorized)} categories, "
                      f"{len(categorizer.unmatched_ids)} not found in the chart")
        return categorized

    async def generate(self) -> str:
        title = self.get_title()
        categorized = await self.fetch_categorized()
        return render_cheat_sheet(categorized, title,
                                  columns=self.config["document.columns"],
                                  toc_name=self.config["document.toc_name"],
                                  shortcodes_name=self.config["document.shortcodes_name"],
                                  shortcodes_url=self.config["sources.shortcodes_url"],
                                  chart_name=self.config["document.chart_name"],
                                  chart_url=self.config["sources.chart_url"])

    async def run(self) -> Path:
        document = await self.generate()
        output = Path(self.config["document.output"])
        output.write_text(document, encoding="utf-8")
        self.log.info(f"Wrote cheat sheet to {output}")
        return output
