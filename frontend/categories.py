from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Protocol

from frontend.routes import HOME_PATH, category_path, lifestyle_path


class Category(str, Enum):
    SHIRTS = "shirts"
    PANTS = "pants"
    SHOES = "shoes"
    ELECTRONICS = "electronics"
    KITCHEN = "kitchen"
    BABY_PRODUCTS = "baby-products"
    # lifestyle 하위 카테고리
    JEWELRY = "jewelry"
    GLASSES = "glasses"
    WATCHES = "watches"
    CAPS = "caps"
    BRACELETS = "bracelets"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()

    @property
    def is_lifestyle(self) -> bool:
        return self in LIFESTYLE_SUBCATEGORIES

    @property
    def path(self) -> str:
        if self.is_lifestyle:
            return lifestyle_path(self.value)
        return category_path(self.value)


TOP_LEVEL_CATEGORIES: tuple[Category, ...] = (
    Category.SHIRTS,
    Category.PANTS,
    Category.SHOES,
    Category.ELECTRONICS,
    Category.KITCHEN,
    Category.BABY_PRODUCTS,
)

LIFESTYLE_SUBCATEGORIES: tuple[Category, ...] = (
    Category.JEWELRY,
    Category.GLASSES,
    Category.WATCHES,
    Category.CAPS,
    Category.BRACELETS,
)


@dataclass(frozen=True)
class NavLink:
    label: str
    path: str
    children: tuple["NavLink", ...] = ()


def navigation_links() -> list[NavLink]:
    """상단 네비게이션 메뉴 (Home, 카테고리, Lifestyle 드롭다운)"""
    links = [NavLink("Home", HOME_PATH)]
    links.extend(NavLink(c.label, c.path) for c in TOP_LEVEL_CATEGORIES)
    links.append(
        NavLink(
            "Lifestyle",
            category_path("lifestyle"),
            tuple(NavLink(c.label, c.path) for c in LIFESTYLE_SUBCATEGORIES),
        )
    )
    return links


class HasCategory(Protocol):
    category: str


@dataclass
class CategoryListing:
    """카테고리 페이지에 그려질 상태"""

    category: Category
    posts: list = field(default_factory=list)

    @property
    def heading(self) -> str:
        return f"{self.category.label} News"

    @property
    def empty_message(self) -> str:
        return f"No {self.category.value.replace('-', ' ')} posts available."

    @property
    def is_empty(self) -> bool:
        return not self.posts


def build_listing(
    category: Category | str, posts: Iterable[HasCategory]
) -> CategoryListing:
    """
    전체 게시물 중 해당 카테고리 게시물만 모아 카테고리 페이지 상태를 만듭니다.

    Args:
        category: Category 또는 카테고리 문자열 (예: "bracelets")
        posts: category 속성을 가진 게시물 목록

    Returns:
        CategoryListing: 원래 순서를 유지한 필터링 결과

    Raises:
        ValueError: 알 수 없는 카테고리인 경우
    """
    category = Category(category)
    return CategoryListing(
        category=category,
        posts=[post for post in posts if post.category == category.value],
    )
