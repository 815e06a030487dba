# backend/mail2chat/utils/config.py

"""
環境変数読み取り用のユーティリティ。

前後の空白は取り除き、空白だけの値は「未設定」と同じに扱う。
（.env に `SLACK_WEBHOOK_URL= ` のように書かれていても誤って使わないため）
"""

import os
from typing import Optional


class EnvVarMissingError(RuntimeError):
    """必須の環境変数が空、または未設定のときの例外。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Environment variable '{name}' must be set to a non-empty value.")
        self.name = name


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    required: bool = True,
) -> Optional[str]:
    """
    前後の空白を除いた環境変数の値を返す。

    required=True で値が無ければ EnvVarMissingError、
    required=False なら default を返す。
    """
    value = (os.getenv(name) or "").strip()
    if value:
        return value

    if required:
        raise EnvVarMissingError(name)
    return default
