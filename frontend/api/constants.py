from typing import Final

# API 엔드포인트
DEFAULT_BASE_URL: Final[str] = "http://localhost:3000"
"""NewsHub 백엔드 기본 URL (NEWSHUB_API_BASE_URL 로 덮어쓰기 가능)"""

POSTS_PATH: Final[str] = "/api/posts"
"""게시물 목록 조회 (search / category 필터)"""

POST_PATH: Final[str] = "/api/posts/{post_id}"
"""게시물 단건 조회"""

POST_VIEW_PATH: Final[str] = "/api/posts/{post_id}/view"
"""게시물 조회수 증가 (응답 본문은 사용하지 않음)"""

POST_COMMENTS_PATH: Final[str] = "/api/posts/{post_id}/comments"
"""게시물 댓글 목록 조회 및 생성"""

SUBSCRIBE_PATH: Final[str] = "/api/subscribe"
"""뉴스레터 구독"""


# 요청 제한 값
DEFAULT_TIMEOUT_SECONDS: Final[float] = 8.0
"""개별 API 호출 타임아웃 (초)"""

SEARCH_LIMIT: Final[int] = 5
"""검색 드롭다운에 노출할 최대 결과 수"""

SEARCH_DEBOUNCE_SECONDS: Final[float] = 0.3
"""검색 입력 디바운스 간격 (초)"""

RELATED_POSTS_LIMIT: Final[int] = 3
"""상세 페이지 하단의 관련 게시물 수"""
