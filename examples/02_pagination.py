from __future__ import annotations

from _infra import Conversation, InMemoryConversations, banner, query_int, run

from kungfu import Error, Ok


def main() -> None:
    banner("02_pagination: optional query params + newest-first pages")

    repo = InMemoryConversations()
    for n in range(7):
        repo.create(Conversation(title=f"conversation #{n}"))

    for params in ({}, {"from": "2", "count": "3"}, {"count": "10", "from": "5"}):
        skip = query_int(params, "from", 0)
        count = query_int(params, "count", 2)
        titles = [c.title for c in repo.fetch_page(skip, count)]
        print(f"{params!r:<30} -> {titles}")

    for entity_id in ("3", "ff"):
        match repo.fetch(entity_id):
            case Ok(conversation):
                print(f"fetched {entity_id}: {conversation.title}")
            case Error(err):
                print(f"error: {err}")


if __name__ == "__main__":
    run(main)
