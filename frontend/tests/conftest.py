import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from frontend.api.client import NewsHubClient
from frontend.api.schemas import Comment, Post, SearchResult


@pytest.fixture(autouse=True)
def reset_client():
    """싱글톤 클라이언트 상태를 테스트마다 초기화"""
    NewsHubClient.reset_client()
    yield
    NewsHubClient.reset_client()


@pytest.fixture
def client():
    """API 호출을 모킹한 NewsHubClient (async 메서드는 AsyncMock)"""
    return MagicMock(spec=NewsHubClient)


@pytest.fixture
def router():
    return MagicMock()


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def mock_post():
    """테스트용 게시물"""
    return Post(
        id="post-1",
        title="New Shoes",
        content="Spring collection",
        category="shoes",
        author="nuung",
        created_at="2024-03-05T10:00:00.000Z",
        views=10,
        comment_count=1,
    )


@pytest.fixture
def mock_related_posts():
    return [
        SearchResult(id="post-2", title="Shoe Sale", category="shoes"),
        SearchResult(id="post-3", title="Running Shoes", category="shoes"),
    ]


@pytest.fixture
def mock_comments():
    return [
        Comment(
            id="c-1",
            post_id="post-1",
            name="Kim",
            email="kim@example.com",
            comment="Nice!",
            created_at="2024-03-06T00:00:00Z",
        )
    ]


@pytest.fixture
def make_response():
    """aiohttp 응답 객체 흉내 (status, json(), text(), read())"""

    def _make(status: int = 200, body=None, text: str = ""):
        response = MagicMock()
        response.status = status
        if isinstance(body, Exception):
            response.json = AsyncMock(side_effect=body)
        else:
            response.json = AsyncMock(return_value=body)
        response.text = AsyncMock(return_value=text)
        response.read = AsyncMock(return_value=b"")
        return response

    return _make


async def wait_until(predicate, timeout: float = 1.0) -> None:
    """조건이 참이 될 때까지 이벤트 루프를 돌린다"""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met in time")
        await asyncio.sleep(0.005)
