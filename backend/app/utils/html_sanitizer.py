"""리치 텍스트(HTML) 필드 저장 전 허용 목록 기반 정제 유틸리티입니다."""

import nh3

ALLOWED_TAGS = {
    "p", "br", "strong", "em", "u", "s",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "blockquote", "a", "img", "figure", "figcaption",
}
ALLOWED_ATTRIBUTES = {"*": {"href", "src", "alt", "title", "target", "rel"}}
ALLOWED_URL_SCHEMES = {"http", "https", "mailto"}


def sanitize_html(html: str | None) -> str | None:
    if html is None:
        return None
    # rel은 입력값 그대로 허용하므로 nh3의 link_rel 자동 부여는 끈다.
    return nh3.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        url_schemes=ALLOWED_URL_SCHEMES,
        link_rel=None,
    )
