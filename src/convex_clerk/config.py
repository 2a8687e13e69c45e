"""Pydantic V2 ベースのアダプタ設定モデル"""

from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TEMPLATE_NAME = "convex"
DEFAULT_SIGN_IN_TIMEOUT = 120.0


class AdapterConfig(BaseModel):
    """認証アダプタの設定

    生成時に確定し、以後は変更しない。環境変数やファイルからは読み込まない。
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    template_name: str = Field(default=DEFAULT_TEMPLATE_NAME, description="JWTテンプレート名")
    sign_in_timeout: float = Field(default=DEFAULT_SIGN_IN_TIMEOUT, gt=0, description="サインイン待機の上限秒数")

    @field_validator("template_name")
    @classmethod
    def validate_template_name(cls, value: str) -> str:
        """空のテンプレート名を拒否する"""
        if not value.strip():
            raise ValueError("template_name は空にできません")
        return value

    @field_validator("sign_in_timeout", mode="before")
    @classmethod
    def coerce_timedelta(cls, value: Any) -> Any:
        """timedelta を秒数に変換する"""
        if isinstance(value, timedelta):
            return value.total_seconds()
        return value
