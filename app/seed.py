"""초기 데이터 시드 스크립트: 어드보킷 디렉터리 데이터 생성.

Seed script: Populates the advocate directory.
Run this script once to bootstrap the database.

Usage:
    python -m app.seed

Creates:
    - 15개 기본 어드보킷 (15 sample advocates)
    - SEED_ADVOCATE_COUNT가 15보다 크면 합성 어드보킷 추가
      (Synthetic advocates up to SEED_ADVOCATE_COUNT when it exceeds 15)
"""

import asyncio
import random
from typing import Any

from app.config import settings
from app.database import async_session, engine, Base
from app.models import Advocate
from app.repositories.advocate_repository import advocate_repository
from app.utils.logger import get_module_logger, setup_logging

logger = get_module_logger(__name__)

# 난수 시드: Fixed RNG seed so repeated runs produce the same data
SEED_RANDOM_STATE: int = 20240101

# 한 번에 삽입할 행 수: Rows per flush when inserting large datasets
INSERT_BATCH_SIZE: int = 1000

SPECIALTIES: list[str] = [
    "Bipolar",
    "LGBTQ",
    "Medication/Prescribing",
    "Suicide History/Attempts",
    "General Mental Health (anxiety, depression, stress, grief, life transitions)",
    "Men's issues",
    "Relationship Issues (family, friends, couple, etc)",
    "Trauma & PTSD",
    "Personality disorders",
    "Personal growth",
    "Substance use/abuse",
    "Pediatrics",
    "Women's issues (post-partum, infertility, family planning)",
    "Chronic pain",
    "Weight loss & nutrition",
    "Eating disorders",
    "Diabetic Diet and nutrition",
    "Coaching (leadership, career, academic and wellness)",
    "Life coaching",
    "Obsessive-compulsive disorders",
    "Neuropsychological evaluations & testing (ADHD testing)",
    "Attention and Hyperactivity (ADHD)",
    "Sleep issues",
    "Schizophrenia and psychotic disorders",
    "Learning disorders",
    "Domestic abuse",
]

# 기본 어드보킷: (first_name, last_name, city, degree, years, phone)
BASE_ADVOCATES: list[tuple[str, str, str, str, int, int]] = [
    ("John", "Doe", "New York", "MD", 10, 5551234567),
    ("Jane", "Smith", "Los Angeles", "PhD", 8, 5559876543),
    ("Alice", "Johnson", "Chicago", "MSW", 5, 5554567890),
    ("Michael", "Brown", "Houston", "MD", 12, 5556543210),
    ("Emily", "Davis", "Phoenix", "PhD", 7, 5553210987),
    ("Chris", "Martinez", "Philadelphia", "MSW", 9, 5557890123),
    ("Jessica", "Taylor", "San Antonio", "MD", 11, 5554561234),
    ("David", "Harris", "San Diego", "PhD", 6, 5557896543),
    ("Laura", "Clark", "Dallas", "MSW", 4, 5550123456),
    ("Daniel", "Lewis", "San Jose", "MD", 13, 5553217654),
    ("Sarah", "Lee", "Austin", "PhD", 10, 5551238765),
    ("James", "King", "Jacksonville", "MSW", 5, 5556540987),
    ("Megan", "Green", "San Francisco", "MD", 14, 5558762345),
    ("Joshua", "Walker", "Columbus", "PhD", 9, 5553456789),
    ("Amanda", "Hall", "Fort Worth", "MSW", 3, 5559872345),
]


def _pick_specialties(rng: random.Random) -> list[str]:
    """전문 분야의 연속 구간을 무작위로 선택합니다: Random contiguous slice of SPECIALTIES."""
    start: int = rng.randint(0, 4)
    end: int = rng.randint(5, len(SPECIALTIES) - 1)
    return SPECIALTIES[start:end]


def build_seed_rows(count: int, random_state: int = SEED_RANDOM_STATE) -> list[dict[str, Any]]:
    """시드할 어드보킷 행 목록을 생성합니다.

    Build ``count`` advocate rows. The first rows are the base sample set;
    rows beyond it recombine names, cities, and degrees from that set with
    random experience and phone numbers. Output is deterministic for a
    given ``random_state``.

    Args:
        count: 생성할 행 수 (Number of rows to build)
        random_state: 난수 시드 (RNG seed)

    Returns:
        list[dict[str, Any]]: Advocate 컬럼 딕셔너리 목록 (Column dicts for Advocate)
    """
    rng = random.Random(random_state)
    first_names = [a[0] for a in BASE_ADVOCATES]
    last_names = [a[1] for a in BASE_ADVOCATES]
    cities = sorted({a[2] for a in BASE_ADVOCATES})
    degrees = sorted({a[3] for a in BASE_ADVOCATES})

    rows: list[dict[str, Any]] = []
    for index in range(max(count, 0)):
        if index < len(BASE_ADVOCATES):
            first_name, last_name, city, degree, years, phone = BASE_ADVOCATES[index]
        else:
            first_name = rng.choice(first_names)
            last_name = rng.choice(last_names)
            city = rng.choice(cities)
            degree = rng.choice(degrees)
            years = rng.randint(1, 30)
            phone = 5550000000 + rng.randint(0, 9999999)
        rows.append(
            {
                "first_name": first_name,
                "last_name": last_name,
                "city": city,
                "degree": degree,
                "specialties": _pick_specialties(rng),
                "years_of_experience": years,
                "phone_number": phone,
            }
        )
    return rows


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with advocate data.
    Creates tables if they don't exist, then inserts the advocates.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    # 테이블 생성: DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        # 이미 시드되었는지 확인: 어드보킷이 하나라도 있으면 건너뜀
        # (Check if already seeded by looking for any existing advocate)
        existing: int = await advocate_repository.count(db)
        if existing > 0:
            logger.info("Already seeded (%d advocates). Skipping.", existing)
            return

        rows = build_seed_rows(settings.SEED_ADVOCATE_COUNT)
        for start in range(0, len(rows), INSERT_BATCH_SIZE):
            await advocate_repository.create_many(db, rows[start:start + INSERT_BATCH_SIZE])

        await db.commit()
        logger.info("Seeded %d advocates into %s", len(rows), Advocate.__tablename__)


async def main() -> None:
    try:
        await seed()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    asyncio.run(main())
