"""ページャー既定値の設定モデル（pydantic BaseModel）"""

from __future__ import annotations

import logging
from typing import IO, Literal

from pydantic import BaseModel, ConfigDict, Field

from .logger import configure_logging
from .params import DEFAULT_BOUNDARIES, DEFAULT_OFFSET, RangeParams


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class PaginationConfig(BaseModel):
    """アプリ全体で共有するページャー既定値。

    ホストアプリの設定（dict / YAML / 環境変数など）から
    ``PaginationConfig.model_validate`` で組み立てる。
    """

    model_config = ConfigDict(frozen=True)

    boundaries: int = Field(default=DEFAULT_BOUNDARIES, ge=0)
    offset: int = Field(default=DEFAULT_OFFSET, ge=0)
    log: LogSection = Field(default_factory=LogSection)

    def params(self, current_page: int, pages: int) -> RangeParams:
        """設定済みの boundaries / offset で RangeParams を組み立てる。"""
        return RangeParams(
            current_page=current_page,
            pages=pages,
            boundaries=self.boundaries,
            offset=self.offset,
        )

    def configure_logging(self, stream: IO[str] | None = None) -> logging.Logger:
        """log セクションの内容で pagerange ロガーを設定する。"""
        return configure_logging(self.log.level, self.log.format, stream=stream)
