"""어드보킷 검색 API 테스트.

Advocate search API tests: text search across fields, experience
threshold, pagination metadata, validation, and failure handling.
"""

from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from app.repositories.advocate_repository import advocate_repository

URL = "/api/advocates"


def _names(res) -> set[str]:
    return {f"{a['first_name']} {a['last_name']}" for a in res.json()["data"]}


class TestAdvocateList:
    """검색어 없는 목록 조회 테스트."""

    async def test_list_defaults(self, client: AsyncClient, advocates):
        """기본 파라미터로 전체 목록 조회."""
        res = await client.get(URL)
        assert res.status_code == 200
        body = res.json()
        assert body["total"] == 5
        assert body["page"] == 1
        assert body["limit"] == 20
        assert body["total_pages"] == 1
        assert [a["id"] for a in body["data"]] == sorted(a.id for a in advocates)

    async def test_response_fields(self, client: AsyncClient, advocates):
        """응답 레코드 필드 확인."""
        res = await client.get(URL, params={"search": "Doe"})
        record = res.json()["data"][0]
        assert record["first_name"] == "John"
        assert record["city"] == "New York"
        assert record["degree"] == "MD"
        assert record["specialties"] == ["Bipolar", "LGBTQ"]
        assert record["years_of_experience"] == 10
        assert record["phone_number"] == 5551234567
        assert record["created_at"] is not None

    async def test_empty_directory(self, client: AsyncClient):
        """데이터가 없으면 빈 페이지."""
        res = await client.get(URL)
        assert res.status_code == 200
        assert res.json() == {"data": [], "total": 0, "page": 1, "limit": 20, "total_pages": 0}


class TestAdvocateTextSearch:
    """텍스트 검색 테스트."""

    async def test_search_names_case_insensitive(self, client: AsyncClient, advocates):
        """이름/성 부분 일치, 대소문자 무시."""
        res = await client.get(URL, params={"search": "john"})
        assert res.status_code == 200
        assert _names(res) == {"John Doe", "Alice Johnson"}
        assert res.json()["total"] == 2

    async def test_search_city(self, client: AsyncClient, advocates):
        res = await client.get(URL, params={"search": "CHICAGO"})
        assert _names(res) == {"Alice Johnson"}

    async def test_search_degree(self, client: AsyncClient, advocates):
        res = await client.get(URL, params={"search": "phd"})
        assert _names(res) == {"Jane Smith"}

    async def test_search_specialties(self, client: AsyncClient, advocates):
        """JSONB 전문 분야 검색."""
        res = await client.get(URL, params={"search": "ptsd"})
        assert _names(res) == {"Jane Smith"}

    async def test_search_phone_number(self, client: AsyncClient, advocates):
        """전화번호 부분 일치."""
        res = await client.get(URL, params={"search": "555987"})
        assert _names(res) == {"Jane Smith", "Amanda Hall"}

    async def test_search_trims_whitespace(self, client: AsyncClient, advocates):
        res = await client.get(URL, params={"search": "  john  "})
        assert res.json()["total"] == 2

    async def test_search_ignores_nul(self, client: AsyncClient, advocates):
        """NUL 문자는 제거 후 검색."""
        res = await client.get(URL, params={"search": "jo\x00hn"})
        assert res.status_code == 200
        assert _names(res) == {"John Doe", "Alice Johnson"}

    async def test_search_unmatched_term(self, client: AsyncClient, advocates):
        """일치 항목 없음: 0건, total=0."""
        res = await client.get(URL, params={"search": "zzzz"})
        assert res.status_code == 200
        body = res.json()
        assert body["data"] == []
        assert body["total"] == 0
        assert body["total_pages"] == 0

    async def test_like_wildcards_match_literally(self, client: AsyncClient, advocates):
        """% 와 _ 는 와일드카드가 아닌 문자로 취급."""
        for term in ("%", "_", "J%n"):
            res = await client.get(URL, params={"search": term})
            assert res.json()["total"] == 0, term


class TestAdvocateExperienceSearch:
    """경력 연수 검색 테스트: 최소 기준."""

    async def test_years_minimum_threshold(self, client: AsyncClient, advocates):
        """'5 years'는 5년 이상."""
        res = await client.get(URL, params={"search": "5 years"})
        assert _names(res) == {"John Doe", "Jane Smith", "Alice Johnson", "Michael Brown"}

    async def test_years_variants(self, client: AsyncClient, advocates):
        """yrs / of experience / 대문자 변형."""
        for term in ("10 yrs", "10 years of experience", "10YEARS", "10 yr"):
            res = await client.get(URL, params={"search": term})
            assert _names(res) == {"John Doe", "Michael Brown"}, term

    async def test_years_above_everyone(self, client: AsyncClient, advocates):
        res = await client.get(URL, params={"search": "40 years"})
        assert res.json()["total"] == 0

    async def test_years_beyond_integer_range(self, client: AsyncClient, advocates):
        """INTEGER 범위를 넘는 경력은 0건."""
        for term in ("3000000000 years", "99999999999999999999 years"):
            res = await client.get(URL, params={"search": term})
            assert res.status_code == 200, term
            assert res.json()["total"] == 0, term
            assert res.json()["data"] == [], term


class TestAdvocatePagination:
    """페이지네이션 테스트."""

    async def test_limit_bounds_page_size(self, client: AsyncClient, advocates):
        """limit=N이면 최대 N건."""
        res = await client.get(URL, params={"limit": 2})
        body = res.json()
        assert len(body["data"]) == 2
        assert body["total"] == 5
        assert body["limit"] == 2
        assert body["total_pages"] == 3

    async def test_pages_cover_all_rows_once(self, client: AsyncClient, advocates):
        """모든 페이지를 합치면 중복 없이 전체."""
        seen: list[int] = []
        for page in (1, 2, 3):
            res = await client.get(URL, params={"limit": 2, "page": page})
            body = res.json()
            assert body["total"] == 5
            seen.extend(a["id"] for a in body["data"])
        assert sorted(seen) == sorted(a.id for a in advocates)
        assert len(seen) == len(set(seen))

    async def test_page_past_end(self, client: AsyncClient, advocates):
        """마지막 페이지 이후는 빈 목록, total 유지."""
        res = await client.get(URL, params={"limit": 2, "page": 4})
        body = res.json()
        assert body["data"] == []
        assert body["total"] == 5
        assert body["page"] == 4

    async def test_page_far_past_end(self, client: AsyncClient, advocates):
        """매우 큰 페이지 번호도 빈 목록, total 유지."""
        res = await client.get(URL, params={"limit": 100, "page": 10**17})
        assert res.status_code == 200
        body = res.json()
        assert body["data"] == []
        assert body["total"] == 5
        assert body["page"] == 10**17

    async def test_total_reflects_filter(self, client: AsyncClient, advocates):
        """total은 필터 적용 결과 개수."""
        res = await client.get(URL, params={"search": "md", "limit": 1})
        body = res.json()
        assert len(body["data"]) == 1
        assert body["total"] == 2
        assert body["total_pages"] == 2


class TestAdvocateValidation:
    """파라미터 검증 테스트."""

    async def test_page_zero_rejected(self, client: AsyncClient):
        res = await client.get(URL, params={"page": 0})
        assert res.status_code == 422

    async def test_limit_out_of_range_rejected(self, client: AsyncClient):
        for limit in (0, 101):
            res = await client.get(URL, params={"limit": limit})
            assert res.status_code == 422, limit

    async def test_non_numeric_page_rejected(self, client: AsyncClient):
        res = await client.get(URL, params={"page": "abc"})
        assert res.status_code == 422


class TestAdvocateFailure:
    """DB 오류 처리 테스트."""

    async def test_database_error_returns_generic_500(self, client: AsyncClient, monkeypatch):
        """DB 오류 시 500과 일반 메시지."""
        async def _failing_search(*args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("connection lost"))

        monkeypatch.setattr(advocate_repository, "search", _failing_search)

        res = await client.get(URL, params={"search": "john"})
        assert res.status_code == 500
        assert res.json() == {"detail": "Failed to fetch advocates"}
