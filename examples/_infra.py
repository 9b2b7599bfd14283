from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from lazyseq import Optional, seq  # noqa: E402


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(slots=True)
class Conversation:
    title: str
    id: str = ""


def _empty_conversations() -> list[Conversation]:
    return []


@dataclass(slots=True)
class InMemoryConversations:
    """Newest-first paginated store over a plain list."""

    storage: list[Conversation] = field(default_factory=_empty_conversations)
    next_id: int = 0

    def create(self, entity: Conversation) -> str:
        entity.id = format(self.next_id, "x")
        self.next_id += 1
        self.storage.append(entity)
        return entity.id

    def fetch(self, entity_id: str) -> Result[Conversation, Failure]:
        found = seq.of(self.storage).filter(lambda c: c.id == entity_id).first_optional()
        return found.to_result(lambda: Failure(f"invalid entity id: {entity_id!r}"))

    def fetch_page(self, skip: int, count: int) -> list[Conversation]:
        return seq.of(self.storage).reverse().skip(skip).take(count).to_array()


def query_int(params: dict[str, str], name: str, default: int) -> int:
    """Optional query parameter parsed as int, falling back to ``default``."""
    return Optional.of(params.get(name)).map(int).default_if_none(default).value


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")
    main()


__all__ = (
    "Conversation",
    "Failure",
    "InMemoryConversations",
    "banner",
    "query_int",
    "run",
)
