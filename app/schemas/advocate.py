"""어드보킷 관련 Pydantic 응답 스키마 정의.

Advocate Pydantic response schema definitions.
"""

from datetime import datetime

from pydantic import BaseModel


class AdvocateResponse(BaseModel):
    """어드보킷 응답 스키마.

    Advocate response schema for directory listings.

    Attributes:
        id: 어드보킷 ID (Advocate identifier)
        first_name: 이름 (First name)
        last_name: 성 (Last name)
        city: 도시 (City)
        degree: 학위 (Degree)
        specialties: 전문 분야 목록 (Specialty strings)
        years_of_experience: 경력 연수 (Years of experience)
        phone_number: 전화번호 (Phone number)
        created_at: 생성 일시 (Creation timestamp, nullable)
    """

    id: int
    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: list[str] = []  # 전문 분야: 비어 있을 수 있음 (May be empty)
    years_of_experience: int
    phone_number: int
    created_at: datetime | None = None


class AdvocatePageResponse(BaseModel):
    """어드보킷 페이지 응답 스키마.

    One page of advocates plus pagination metadata.

    Attributes:
        data: 현재 페이지 어드보킷 목록 (Advocates on the current page)
        total: 필터 적용 후 전체 개수 (Total matching rows across all pages)
        page: 현재 페이지 번호 (Current page, 1-indexed)
        limit: 페이지당 항목 수 (Page size)
        total_pages: 전체 페이지 수 (ceil(total / limit), 0 when nothing matches)
    """

    data: list[AdvocateResponse]
    total: int
    page: int
    limit: int
    total_pages: int
