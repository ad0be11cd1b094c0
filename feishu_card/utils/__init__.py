from __future__ import annotations

from feishu_card.utils.logger import JsonFormatter, setup_logging

__all__ = ["JsonFormatter", "setup_logging"]
