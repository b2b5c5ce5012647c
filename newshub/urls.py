from django.urls import URLPattern

# 페이지 라우트는 프런트엔드가 담당하며 여기서는 인증 게이트만 동작한다
urlpatterns: list[URLPattern] = []
