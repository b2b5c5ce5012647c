import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from frontend.api.exceptions import NetworkFailure, NotFound, ServerError
from frontend.api.schemas import CommentDraft
from frontend.api.service import NewsHubService


@pytest.fixture
def session():
    session = MagicMock()
    session.get = AsyncMock()
    session.post = AsyncMock()
    return session


@pytest.fixture
def service(session):
    return NewsHubService(session, base_url="http://api.test/", timeout=1)


class TestNewsHubService:
    @pytest.mark.asyncio
    async def test_get_post_parses_camel_case_payload(
        self, service, session, make_response
    ):
        """백엔드의 camelCase 필드를 Post 로 변환하는지 테스트"""
        session.get.return_value = make_response(
            200,
            {
                "_id": "abc",
                "title": "New Shoes",
                "content": "body",
                "category": "shoes",
                "imageUrl": "https://res.cloudinary.com/x.png",
                "author": {"name": "nuung"},
                "createdAt": "2024-03-05T10:00:00.000Z",
                "views": 7,
                "commentCount": 2,
            },
        )

        post = await service.get_post("abc")

        assert post.id == "abc"
        assert post.image == "https://res.cloudinary.com/x.png"
        assert post.author == "nuung"
        assert post.views == 7
        assert post.comment_count == 2
        assert session.get.call_args.args[0] == "http://api.test/api/posts/abc"

    @pytest.mark.asyncio
    async def test_get_post_404_raises_not_found(
        self, service, session, make_response
    ):
        session.get.return_value = make_response(404, {"error": "Post not found"})

        with pytest.raises(NotFound) as exc_info:
            await service.get_post("missing")

        assert exc_info.value.status == 404
        assert exc_info.value.message == "Post not found"

    @pytest.mark.asyncio
    async def test_get_post_empty_body_raises_not_found(
        self, service, session, make_response
    ):
        session.get.return_value = make_response(200, None)

        with pytest.raises(NotFound):
            await service.get_post("abc")

    @pytest.mark.asyncio
    async def test_server_error_keeps_server_message(
        self, service, session, make_response
    ):
        session.post.return_value = make_response(
            400, {"error": "Comment is too long"}
        )

        with pytest.raises(ServerError) as exc_info:
            await service.create_comment(
                "abc", CommentDraft("Kim", "kim@example.com", "x" * 5000)
            )

        assert exc_info.value.status == 400
        assert exc_info.value.message == "Comment is too long"

    @pytest.mark.asyncio
    async def test_server_error_html_body_has_empty_message(
        self, service, session, make_response
    ):
        """JSON 이 아닌 에러 본문은 사용자 메시지로 쓰지 않는다"""
        session.get.return_value = make_response(
            502, ValueError("not json"), text="<html>Bad Gateway</html>"
        )

        with pytest.raises(ServerError) as exc_info:
            await service.search_posts("shoe")

        assert exc_info.value.status == 502
        assert exc_info.value.message == ""

    @pytest.mark.asyncio
    async def test_client_error_wrapped_as_network_failure(
        self, service, session
    ):
        session.get.side_effect = aiohttp.ClientConnectionError("refused")

        with pytest.raises(NetworkFailure):
            await service.get_comments("abc")

    @pytest.mark.asyncio
    async def test_timeout_wrapped_as_network_failure(self, session):
        """타임아웃은 네트워크 실패와 같은 경로로 처리"""

        async def slow_get(*args, **kwargs):
            await asyncio.sleep(1)

        session.get.side_effect = slow_get
        service = NewsHubService(session, base_url="http://api.test", timeout=0.01)

        with pytest.raises(NetworkFailure):
            await service.get_post("abc")

    @pytest.mark.asyncio
    async def test_search_posts_params_and_order(
        self, service, session, make_response
    ):
        session.get.return_value = make_response(
            200,
            {
                "posts": [
                    {"id": 2, "title": "Shoe Sale", "category": "shoes"},
                    {"id": 1, "title": "New Shoes", "category": "shoes"},
                ]
            },
        )

        results = await service.search_posts("shoe", limit=5)

        assert [r.id for r in results] == ["2", "1"]
        assert session.get.call_args.args[0] == "http://api.test/api/posts"
        assert session.get.call_args.kwargs["params"] == {
            "search": "shoe",
            "limit": 5,
        }

    @pytest.mark.asyncio
    async def test_search_posts_caps_to_limit(
        self, service, session, make_response
    ):
        session.get.return_value = make_response(
            200, {"posts": [{"id": i, "title": f"T{i}"} for i in range(8)]}
        )

        results = await service.search_posts("t", limit=5)

        assert len(results) == 5

    @pytest.mark.asyncio
    async def test_missing_posts_key_returns_empty_list(
        self, service, session, make_response
    ):
        session.get.return_value = make_response(200, {})

        assert await service.search_posts("shoe") == []

    @pytest.mark.asyncio
    async def test_get_related_posts_params(
        self, service, session, make_response
    ):
        session.get.return_value = make_response(200, {"posts": []})

        await service.get_related_posts("shoes", "abc", limit=3)

        assert session.get.call_args.kwargs["params"] == {
            "category": "shoes",
            "limit": 3,
            "exclude": "abc",
        }

    @pytest.mark.asyncio
    async def test_track_view_ignores_body(
        self, service, session, make_response
    ):
        response = make_response(200, {"views": 11})
        session.post.return_value = response

        await service.track_view("abc")

        assert session.post.call_args.args[0] == "http://api.test/api/posts/abc/view"
        response.json.assert_not_awaited()
        response.read.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_comment_payload(
        self, service, session, make_response
    ):
        session.post.return_value = make_response(
            201,
            {
                "id": "c-9",
                "postId": "abc",
                "name": "Kim",
                "email": "kim@example.com",
                "comment": "hi",
            },
        )

        comment = await service.create_comment(
            "abc", CommentDraft("Kim", "kim@example.com", "hi")
        )

        assert comment.id == "c-9"
        assert comment.post_id == "abc"
        assert session.post.call_args.kwargs["json"] == {
            "name": "Kim",
            "email": "kim@example.com",
            "comment": "hi",
        }

    @pytest.mark.asyncio
    async def test_get_comments_keeps_backend_order(
        self, service, session, make_response
    ):
        session.get.return_value = make_response(
            200,
            {
                "comments": [
                    {"id": "c-2", "name": "B", "comment": "second"},
                    {"id": "c-1", "name": "A", "comment": "first"},
                ]
            },
        )

        comments = await service.get_comments("abc")

        assert [c.id for c in comments] == ["c-2", "c-1"]
        assert all(c.post_id == "abc" for c in comments)

    @pytest.mark.asyncio
    async def test_subscribe_returns_message(
        self, service, session, make_response
    ):
        session.post.return_value = make_response(200, {"message": "Subscribed"})

        message = await service.subscribe("a@b.com")

        assert message == "Subscribed"
        assert session.post.call_args.args[0] == "http://api.test/api/subscribe"
        assert session.post.call_args.kwargs["json"] == {"email": "a@b.com"}
