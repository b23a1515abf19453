"""기본 레포지토리: 모든 레포지토리의 부모 클래스.

Base Repository: Parent class for domain repositories.
Provides the generic read and insert operations shared by all models.

Usage:
    class AdvocateRepository(BaseRepository[Advocate]):
        def __init__(self) -> None:
            super().__init__(Advocate)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.utils.pagination import paginate

# 제네릭 타입 변수: SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 레포지토리.

    Generic repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수를 조회합니다.

        Count all rows of the model's table.
        """
        result = await db.execute(select(func.count()).select_from(self.model))
        return result.scalar() or 0

    async def get_paginated(
        self,
        db: AsyncSession,
        query: Select,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[ModelType], int]:
        """페이지네이션이 적용된 레코드 목록을 조회합니다.

        Retrieve a paginated list of records.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            query: 기본 SELECT 쿼리 (Base SELECT query)
            page: 현재 페이지 번호, 1부터 시작 (Current page number, 1-based)
            per_page: 페이지당 레코드 수 (Number of records per page)

        Returns:
            tuple[Sequence[ModelType], int]: (레코드 목록, 전체 개수)
                                             (List of records, total count)
        """
        return await paginate(db, query, page, per_page)

    async def create_many(
        self,
        db: AsyncSession,
        rows: list[dict[str, Any]],
    ) -> list[ModelType]:
        """여러 레코드를 한 번에 생성합니다.

        Insert several records in one flush.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            rows: 생성할 레코드 데이터 목록 (List of column dicts)

        Returns:
            list[ModelType]: 생성된 레코드 목록 (The created records)
        """
        db_objs: list[ModelType] = [self.model(**row) for row in rows]
        db.add_all(db_objs)
        await db.flush()
        return db_objs
