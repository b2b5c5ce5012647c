import logging
import re
from dataclasses import dataclass
from enum import Enum

import sentry_sdk

from frontend.api.client import NewsHubClient
from frontend.api.constants import SEARCH_DEBOUNCE_SECONDS, SEARCH_LIMIT
from frontend.api.exceptions import NewsHubError
from frontend.api.schemas import SearchResult
from frontend.debounce import LatestOnlyDebouncer
from frontend.protocols import Router
from frontend.routes import post_path, search_path
from utils.utils import format_short_date

logger = logging.getLogger("frontend")


class SearchState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SEARCHING = "searching"
    RESULTS = "results"
    # 화면에는 IDLE 과 같게 보이지만 내부적으로 실패를 구분한다
    ERRORED = "errored"
    DISMISSED = "dismissed"


@dataclass(frozen=True)
class HighlightSegment:
    text: str
    matched: bool = False


def highlight_search_term(text: str, query: str) -> list[HighlightSegment]:
    """
    제목에서 검색어와 일치하는 부분을 대소문자 구분 없이 나눠 표시합니다.
    검색어의 정규식 특수문자는 escape 하여 문자 그대로 비교합니다.

    Args:
        text: 결과 제목
        query: 현재 검색어

    Returns:
        list[HighlightSegment]: 순서대로 이어 붙이면 원문이 되는 조각 목록
    """
    term = query.strip()
    if not term or not text:
        return [HighlightSegment(text)] if text else []

    parts = re.split(f"({re.escape(term)})", text, flags=re.IGNORECASE)
    return [
        HighlightSegment(part, part.lower() == term.lower())
        for part in parts
        if part
    ]


class SearchController:
    """
    네비게이션 바의 실시간 검색 상태 머신

    IDLE -> PENDING (디바운스) -> SEARCHING -> RESULTS
    바깥 클릭, 결과 선택, 검색 제출은 어느 상태에서든 DISMISSED 로 보낸다.
    """

    def __init__(
        self,
        client: NewsHubClient,
        router: Router,
        debounce: float = SEARCH_DEBOUNCE_SECONDS,
        limit: int = SEARCH_LIMIT,
    ):
        self.client = client
        self.router = router
        self.limit = limit
        self.query = ""
        self.results: list[SearchResult] = []
        # results 가 어떤 검색어의 응답인지 (focus 로 다시 열 때 비교)
        self._results_query: str | None = None
        self.state = SearchState.IDLE
        self.last_error: NewsHubError | None = None
        self._debouncer = LatestOnlyDebouncer(debounce)

    @property
    def trimmed_query(self) -> str:
        return self.query.strip()

    @property
    def is_open(self) -> bool:
        """결과 패널 노출 여부"""
        return self.state in (SearchState.SEARCHING, SearchState.RESULTS)

    @property
    def is_loading(self) -> bool:
        return self.state == SearchState.SEARCHING

    @property
    def no_results_message(self) -> str | None:
        if self.state == SearchState.RESULTS and not self.results:
            return f'No results found for "{self.query}"'
        return None

    def highlight(self, text: str) -> list[HighlightSegment]:
        return highlight_search_term(text, self.query)

    @staticmethod
    def formatted_date(result: SearchResult) -> str:
        return format_short_date(result.created_at)

    def on_input(self, text: str) -> None:
        """
        키 입력마다 호출됩니다. 디바운스 타이머를 다시 시작합니다.
        공백뿐인 검색어는 요청 없이 결과를 비우고 패널을 닫습니다.
        """
        self.query = text
        if not self.trimmed_query:
            self._debouncer.invalidate()
            self.results = []
            self._results_query = None
            self.state = SearchState.IDLE
            return

        self.state = SearchState.PENDING
        self._debouncer.schedule(self._search)

    async def _search(self, token: int) -> None:
        query = self.trimmed_query
        self.state = SearchState.SEARCHING
        try:
            results = await self.client.search_posts(query, self.limit)
        except NewsHubError as e:
            if not self._debouncer.is_current(token):
                return
            logger.error(f"Failed to fetch search results: {e} (query: {query})")
            sentry_sdk.capture_exception(e)
            self.last_error = e
            self.results = []
            self._results_query = None
            self.state = SearchState.ERRORED
            return

        if not self._debouncer.is_current(token):
            logger.debug(f"Discarded stale search response (query: {query})")
            return
        self.last_error = None
        self.results = results[: self.limit]
        self._results_query = query
        self.state = SearchState.RESULTS

    def focus(self) -> None:
        """
        입력창 포커스 시 현재 검색어에 대한 결과가 있으면 다시 보여줍니다.
        디바운스나 요청이 진행 중이면 그 결과를 기다립니다.
        """
        if self.state in (SearchState.PENDING, SearchState.SEARCHING):
            return
        if self._debouncer.has_pending:
            return
        query = self.trimmed_query
        if query and self.results and self._results_query == query:
            self.state = SearchState.RESULTS

    def pointer_down(self, inside: bool) -> None:
        """검색 영역 바깥을 누르면 결과를 닫습니다."""
        if not inside:
            self.dismiss()

    def dismiss(self) -> None:
        # 진행 중인 요청이 끝나도 패널을 다시 열지 않도록 결과 반영을 막는다
        self._debouncer.invalidate()
        self.state = SearchState.DISMISSED

    def _reset(self) -> None:
        self.query = ""
        self.results = []
        self._results_query = None
        self.dismiss()

    def submit(self) -> bool:
        """
        검색 폼 제출. 전체 결과 페이지로 이동합니다.

        Returns:
            bool: 이동했으면 True, 검색어가 비어 있으면 False
        """
        query = self.trimmed_query
        if not query:
            return False
        self.router.push(search_path(query))
        self._reset()
        return True

    def view_all(self) -> None:
        """드롭다운의 "View all results" 버튼"""
        self.router.push(search_path(self.query))
        self.dismiss()

    def select_result(self, post_id: str) -> None:
        self.router.push(post_path(post_id))
        self._reset()

    async def wait(self) -> None:
        """대기 중인 디바운스 타이머와 요청이 모두 끝날 때까지 기다립니다."""
        await self._debouncer.wait()

    async def aclose(self) -> None:
        await self._debouncer.aclose()
