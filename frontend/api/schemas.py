from dataclasses import dataclass

from frontend.api.exceptions import ValidationFailure


@dataclass
class Post:
    id: str
    title: str
    content: str = ""
    category: str = ""
    image: str | None = None
    author: str = ""
    created_at: str | None = None
    views: int = 0
    comment_count: int = 0


@dataclass
class SearchResult:
    """목록 API (검색 / 관련 게시물) 가 돌려주는 Post 의 일부 필드"""

    id: str
    title: str
    category: str = ""
    image: str | None = None
    created_at: str | None = None


@dataclass
class Comment:
    id: str
    post_id: str
    name: str
    email: str
    comment: str
    created_at: str | None = None


@dataclass
class CommentDraft:
    name: str = ""
    email: str = ""
    comment: str = ""

    def validate(self) -> None:
        """
        필수 항목(name, email, comment)이 모두 채워졌는지 확인합니다.
        이메일 형식은 여기서 검사하지 않습니다. (서버가 판단)

        Raises:
            ValidationFailure: 비어 있는 항목이 있는 경우
        """
        for field_name in ("name", "email", "comment"):
            if not getattr(self, field_name).strip():
                raise ValidationFailure(
                    "Please fill in all required fields", field=field_name
                )

    def clear(self) -> None:
        self.name = ""
        self.email = ""
        self.comment = ""

    def to_payload(self) -> dict[str, str]:
        return {
            "name": self.name,
            "email": self.email,
            "comment": self.comment,
        }
