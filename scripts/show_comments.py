#!/usr/bin/env python3
"""Print an artbook's comment tree as the API serves it.

Usage: show_comments.py <slug> [pages]

Reads CLIENT__BASE_URL and CLIENT__AUTH_TOKEN like the rest of the
settings; without a token the tree is fetched anonymously.
"""

import asyncio
import sys

import logfire

from artbook.adapter.artbook_api import CommentApiClient
from artbook.client import CommentNode, CommentStateController, LogfireNotifier
from artbook.config import Settings
from artbook.util.di.container import create_client_container
from artbook.util.logging import setup_logging
from artbook.util.observability import configure_logfire


def render(nodes: list[CommentNode], indent: int = 0) -> None:
    for node in nodes:
        likes = f"{node.like_count} like{'s' if node.like_count != 1 else ''}"
        print(f"{'  ' * indent}- {node.author.name}: {node.content} ({likes})")
        render(node.replies, indent + 1)


async def show(slug: str, pages: int) -> int:
    container = create_client_container()
    try:
        api = await container.get(CommentApiClient)
        settings = await container.get(Settings)
        controller = CommentStateController(
            api,
            slug,
            LogfireNotifier(),
            page_size=settings.comments.default_page_size,
        )
        with logfire.span("show_comments", slug=slug):
            await controller.load()
            for _ in range(pages - 1):
                await controller.load_more()
    finally:
        await container.close()

    render(controller.state.comments)
    print(f"{controller.total_comments} comments")
    return 0


def main(slug: str, pages: str = "1") -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)
    return asyncio.run(show(slug, max(1, int(pages))))


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(main(*sys.argv[1:3]))
