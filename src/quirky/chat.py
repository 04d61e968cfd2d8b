"""Chat log: append-only, keeps only the most recent lines"""

import threading
from collections import deque
from dataclasses import dataclass
from typing import Optional

from src.core.config import settings


@dataclass(frozen=True)
class ChatLine:
    id: int
    name: str
    input: str


class ChatLog:
    def __init__(self, max_lines: int = settings.chat_lines) -> None:
        self._lines: deque[ChatLine] = deque(maxlen=max_lines)
        self._next_id = 0
        self._lock = threading.Lock()

    def post(self, name: str, text: str) -> ChatLine:
        with self._lock:
            line = ChatLine(id=self._next_id, name=name, input=text)
            self._next_id += 1
            self._lines.append(line)
            return line

    def since(self, last_id: Optional[int] = None) -> list[ChatLine]:
        """Lines posted after `last_id` (all lines we still hold if no id is given)"""
        with self._lock:
            if last_id is None or last_id < 0:
                return list(self._lines)
            return [line for line in self._lines if line.id > last_id]
