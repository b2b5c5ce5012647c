from dataclasses import dataclass

from frontend.api.client import NewsHubClient
from frontend.config import FrontendConfig
from frontend.navbar import Navbar
from frontend.newsletter import SubscribeControl
from frontend.post_detail import PostDetailLoader
from frontend.protocols import HttpSession, Notifier, Router
from frontend.search import SearchController


@dataclass
class PageShell:
    """모든 페이지가 공유하는 틀 (네비게이션 바 + 푸터 구독 폼)"""

    client: NewsHubClient
    config: FrontendConfig
    navbar: Navbar
    newsletter: SubscribeControl

    def post_detail(self, notifier: Notifier) -> PostDetailLoader:
        """상세 페이지 마운트마다 새 로더를 만든다"""
        return PostDetailLoader(
            self.client, notifier, related_limit=self.config.related_limit
        )

    async def aclose(self) -> None:
        await self.navbar.search.aclose()


def create_shell(
    session: HttpSession,
    router: Router,
    config: FrontendConfig | None = None,
) -> PageShell:
    """
    세션과 설정으로 클라이언트와 컨트롤러들을 조립합니다.

    Args:
        session: HTTP 세션 객체 (aiohttp.ClientSession 등)
        router: 페이지 이동 라우터
        config: 설정 (None 이면 환경 변수에서 읽음)

    Returns:
        PageShell: 조립된 페이지 틀
    """
    config = config or FrontendConfig.from_env()
    client = NewsHubClient.get_client(
        session,
        base_url=config.api_base_url,
        timeout=config.request_timeout,
    )
    search = SearchController(
        client,
        router,
        debounce=config.search_debounce,
        limit=config.search_limit,
    )
    return PageShell(
        client=client,
        config=config,
        navbar=Navbar(search),
        newsletter=SubscribeControl(client),
    )
