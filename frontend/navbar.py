from dataclasses import dataclass

from frontend.categories import NavLink, navigation_links
from frontend.search import SearchController


@dataclass
class NavbarState:
    mobile_menu_open: bool = False
    lifestyle_dropdown_open: bool = False
    mobile_search_open: bool = False


class Navbar:
    """네비게이션 바: 메뉴/드롭다운/모바일 검색 토글과 실시간 검색을 묶는다"""

    def __init__(self, search: SearchController):
        self.search = search
        self.state = NavbarState()

    @property
    def links(self) -> list[NavLink]:
        return navigation_links()

    def toggle_menu(self) -> None:
        self.state.mobile_menu_open = not self.state.mobile_menu_open
        # 메뉴와 모바일 검색은 동시에 열리지 않는다
        self.state.mobile_search_open = False

    def toggle_lifestyle_dropdown(self) -> None:
        self.state.lifestyle_dropdown_open = (
            not self.state.lifestyle_dropdown_open
        )

    def toggle_mobile_search(self) -> None:
        self.state.mobile_search_open = not self.state.mobile_search_open
        self.state.mobile_menu_open = False

    def _close_overlays(self) -> None:
        self.state.mobile_search_open = False
        self.state.mobile_menu_open = False

    def submit_search(self) -> bool:
        submitted = self.search.submit()
        if submitted:
            self._close_overlays()
        return submitted

    def view_all_results(self) -> None:
        self.search.view_all()
        self.state.mobile_search_open = False

    def select_result(self, post_id: str) -> None:
        self.search.select_result(post_id)
        self._close_overlays()
