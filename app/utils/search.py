"""검색어 해석 유틸리티.

Search term helpers for the advocate directory.
A term such as "3 years", "15 yrs" or "5 years of experience" is read as a
minimum-experience threshold instead of free text.
"""

import re

# 경력 검색 패턴: "<N> year|yr|yrs|years [of experience]", case-insensitive
_EXPERIENCE_PATTERN = re.compile(
    r"^(\d+)\s*(year|yr|yrs|years)(\s+of\s+experience)?$",
    re.IGNORECASE,
)


def normalize_search_term(search: str | None) -> str:
    """검색어 앞뒤 공백과 NUL 문자를 제거합니다. None은 빈 문자열로 처리.

    PostgreSQL text values cannot hold NUL, so it is dropped from the term.
    """
    return (search or "").replace("\x00", "").strip()


def parse_min_experience(search: str) -> int | None:
    """경력 검색어이면 최소 경력 연수를 반환합니다.

    Return the minimum years of experience encoded in ``search``, or None
    when the term is ordinary free text.

    Args:
        search: 정규화된 검색어 (Normalized search term)

    Returns:
        int | None: 최소 경력 연수 또는 None (Threshold in years, or None)
    """
    match = _EXPERIENCE_PATTERN.match(search)
    if match is None:
        return None
    return int(match.group(1))
