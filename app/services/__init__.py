"""서비스 패키지: 비즈니스 로직 계층.

Service package: Business logic layer.
Services validate and normalize input, call repositories for DB
operations, and convert models into response schemas.
"""
