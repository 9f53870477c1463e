from typing import Optional


class EmojiSheetError(Exception):
    pass


class TransportError(EmojiSheetError):
    pass


class MalformedSourceError(EmojiSheetError):
    def __init__(self, message: str, emoji_id: Optional[str] = None) -> None:
        if emoji_id is not None:
            message = f"{message} (shortcode {emoji_id!r})"
        super().__init__(message)
        self.emoji_id = emoji_id


class MalformedChartError(EmojiSheetError):
    pass


class ConfigError(EmojiSheetError):
    pass
