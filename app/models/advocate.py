"""어드보킷 SQLAlchemy ORM 모델 정의.

Advocate SQLAlchemy ORM model definition.

Tables:
    - advocates: 검색 가능한 어드보킷 디렉터리 (Searchable advocate directory)
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Index, Integer, Text, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Advocate(Base):
    """어드보킷 모델: 자격, 지역, 전문 분야를 가진 디렉터리 레코드.

    Advocate model: A directory record for a person with credentials,
    location, and specialties. Rows are inserted at seed time and only read
    afterwards; there are no relationships to other tables.

    Attributes:
        id: 고유 식별자 (Serial primary key)
        first_name: 이름 (First name)
        last_name: 성 (Last name)
        city: 도시 (City)
        degree: 학위 (Degree, e.g. MD, PhD, MSW)
        specialties: 전문 분야 목록 (JSONB list of specialty strings)
        years_of_experience: 경력 연수 (Years of experience)
        phone_number: 전화번호 (Phone number stored as bigint)
        created_at: 생성 일시 (Creation timestamp, server default)
    """

    __tablename__ = "advocates"
    __table_args__ = (
        # B-tree 인덱스: Text field indexes for the ILIKE search
        Index("idx_advocates_first_name", "first_name"),
        Index("idx_advocates_last_name", "last_name"),
        Index("idx_advocates_city", "city"),
        Index("idx_advocates_degree", "degree"),
        # GIN 인덱스: JSONB specialties index
        Index("idx_advocates_specialties_gin", "specialties", postgresql_using="gin"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(Text, nullable=False)
    degree: Mapped[str] = mapped_column(Text, nullable=False)
    # 전문 분야: JSONB array of strings, empty list by default
    specialties: Mapped[list[str]] = mapped_column(
        JSONB, nullable=False, default=list, server_default=text("'[]'::jsonb")
    )
    years_of_experience: Mapped[int] = mapped_column(Integer, nullable=False)
    phone_number: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP")
    )
