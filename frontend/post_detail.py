import asyncio
import logging
from enum import Enum
from typing import Final

import sentry_sdk

from frontend.api.client import NewsHubClient
from frontend.api.constants import RELATED_POSTS_LIMIT
from frontend.api.exceptions import (
    NewsHubError,
    NotFound,
    ServerError,
    ValidationFailure,
)
from frontend.api.schemas import Comment, CommentDraft, Post, SearchResult
from frontend.protocols import Notifier
from utils.utils import format_long_date

logger = logging.getLogger("frontend")

COMMENT_ADDED_MESSAGE: Final[str] = "Comment added successfully!"
COMMENT_FAILED_MESSAGE: Final[str] = "Failed to submit comment"


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    # 404 가 아닌 실패. 화면에는 not found 와 같이 그려진다
    FAILED = "failed"


class PostDetailLoader:
    """
    게시물 상세 페이지 로더

    load() 순서:
        1. 게시물 조회 (없으면 NOT_FOUND 로 종료)
        2. 조회수 증가 (게시물 ID 당 한 번, 실패해도 무시)
        3. 같은 카테고리의 관련 게시물 조회
        4. 댓글 전체 조회
    2~4 는 1 이 성공한 뒤 동시에 실행된다.
    """

    def __init__(
        self,
        client: NewsHubClient,
        notifier: Notifier,
        related_limit: int = RELATED_POSTS_LIMIT,
    ):
        self.client = client
        self.notifier = notifier
        self.related_limit = related_limit

        self.post_id: str | None = None
        self.post: Post | None = None
        self.related_posts: list[SearchResult] = []
        self.comments: list[Comment] = []
        self.state = LoadState.IDLE
        self.draft = CommentDraft()

        # 이전 게시물에 대한 응답을 버리기 위한 세대 번호
        self._generation = 0
        # 조회수를 이미 올린 게시물 ID (ID 가 바뀌면 다시 올린다)
        self._tracked_post_id: str | None = None
        self._submitting: set[str] = set()
        self._task: asyncio.Task | None = None
        # open() 으로 마지막에 요청된 게시물 ID (작업이 시작되기 전에도 기록된다)
        self._task_post_id: str | None = None

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    @property
    def is_submitting(self) -> bool:
        return self.post_id in self._submitting

    @property
    def formatted_date(self) -> str:
        return format_long_date(self.post.created_at) if self.post else ""

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def open(self, post_id: str) -> asyncio.Task:
        """
        라우트 파라미터가 정해질 때마다 (재렌더 포함) 호출됩니다.
        같은 ID 로 다시 호출되면 기존 로드 작업을 그대로 돌려주고, ID 가 바뀌면
        이전 로드 작업을 취소한 뒤 새로 시작합니다.

        Args:
            post_id: 게시물 ID

        Returns:
            asyncio.Task: 로드 작업
        """
        if post_id == self._task_post_id and self._task is not None:
            return self._task

        self._task_post_id = post_id
        # 시작되기 전에 취소된 로드도 ID 변경으로 본다
        self._tracked_post_id = None
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = asyncio.create_task(self.load(post_id))
        return self._task

    async def load(self, post_id: str) -> None:
        if post_id != self.post_id:
            self.post_id = post_id
            self.post = None
            self.related_posts = []
            self.comments = []
            self.draft.clear()
            self._tracked_post_id = None

        self._generation += 1
        generation = self._generation
        self.state = LoadState.LOADING

        try:
            post = await self.client.get_post(post_id)
        except NotFound:
            if self._is_current(generation):
                logger.info(f"Post not found (post_id: {post_id})")
                self.post = None
                self.state = LoadState.NOT_FOUND
            return
        except NewsHubError as e:
            if self._is_current(generation):
                logger.error(f"Error fetching post: {e} (post_id: {post_id})")
                sentry_sdk.capture_exception(e)
                self.post = None
                self.state = LoadState.FAILED
            return

        if not self._is_current(generation):
            return
        self.post = post
        self.state = LoadState.LOADED

        tasks = []
        if self._tracked_post_id != post_id:
            self._tracked_post_id = post_id
            tasks.append(self._track_view(post_id))
        tasks.append(self._fetch_related(post, generation))
        tasks.append(self._fetch_comments(post_id, generation))
        await asyncio.gather(*tasks)

    async def _track_view(self, post_id: str) -> None:
        try:
            await self.client.track_view(post_id)
        except NewsHubError as e:
            logger.warning(f"Error tracking view: {e} (post_id: {post_id})")
            sentry_sdk.capture_exception(e)

    async def _fetch_related(self, post: Post, generation: int) -> None:
        try:
            related = await self.client.get_related_posts(
                post.category, post.id, self.related_limit
            )
        except NewsHubError as e:
            logger.warning(
                f"Error fetching related posts: {e} (post_id: {post.id})"
            )
            sentry_sdk.capture_exception(e)
            return
        if self._is_current(generation):
            self.related_posts = related

    async def _fetch_comments(self, post_id: str, generation: int) -> None:
        try:
            comments = await self.client.get_comments(post_id)
        except NewsHubError as e:
            logger.warning(f"Error fetching comments: {e} (post_id: {post_id})")
            sentry_sdk.capture_exception(e)
            return
        if self._is_current(generation):
            self.comments = comments

    def update_draft(self, field: str, value: str) -> None:
        if field not in ("name", "email", "comment"):
            raise ValueError(f"unknown comment field: {field}")
        setattr(self.draft, field, value)

    async def submit_comment(self) -> bool:
        """
        댓글 작성 폼 제출

        필수 항목 검사 -> 작성 요청 -> 성공 시 폼 초기화 및 댓글 목록 재조회.
        같은 게시물에 대한 이전 제출이 끝나기 전에는 다시 제출할 수 없습니다.

        Returns:
            bool: 작성 성공 여부
        """
        post_id = self.post_id
        if post_id is None or self.post is None:
            return False
        if post_id in self._submitting:
            return False

        try:
            self.draft.validate()
        except ValidationFailure as e:
            self.notifier.alert(e.message)
            return False

        self._submitting.add(post_id)
        try:
            await self.client.create_comment(post_id, self.draft)
        except ServerError as e:
            logger.warning(f"Comment rejected: {e} (post_id: {post_id})")
            self.notifier.alert(e.message or COMMENT_FAILED_MESSAGE)
            return False
        except NewsHubError as e:
            logger.error(f"Error submitting comment: {e} (post_id: {post_id})")
            sentry_sdk.capture_exception(e)
            self.notifier.alert(COMMENT_FAILED_MESSAGE)
            return False
        finally:
            self._submitting.discard(post_id)

        self.notifier.alert(COMMENT_ADDED_MESSAGE)
        if self.post_id == post_id:
            self.draft.clear()
            # 화면의 댓글 수가 서버와 어긋나지 않도록 낙관적 추가 없이 전체 재조회
            await self._fetch_comments(post_id, self._generation)
        return True

    async def unmount(self) -> None:
        """페이지를 떠날 때 진행 중인 요청을 취소하고 결과 반영을 막습니다."""
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
            await asyncio.gather(self._task, return_exceptions=True)
        self._task = None
        self._task_post_id = None
