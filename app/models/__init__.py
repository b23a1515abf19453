"""SQLAlchemy ORM 모델 패키지: 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package: Central import point for all domain models.
Importing from this package registers every model with the SQLAlchemy
metadata, which Alembic and ``Base.metadata.create_all`` rely on.

Modules:
    advocate: 어드보킷 디렉터리 (Advocate directory records)
"""

from app.models.advocate import Advocate

__all__ = [
    "Advocate",
]
