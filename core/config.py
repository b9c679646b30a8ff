from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정을 관리하는 클래스.

    환경 변수에서 설정을 로드하며, 기본값을 제공합니다.

    Attributes:
        ALLOWED_ORIGINS: CORS 허용 오리진 목록.
        DB_HOST: MySQL 호스트 주소.
        DB_PORT: MySQL 포트 번호.
        DB_USER: MySQL 사용자명.
        DB_PASSWORD: MySQL 비밀번호.
        DB_NAME: MySQL 데이터베이스 이름.
        DB_POOL_MIN_SIZE: 연결 풀 최소 연결 수.
        DB_POOL_MAX_SIZE: 연결 풀 최대 연결 수.
        DB_CONNECT_TIMEOUT: 연결 타임아웃 (초).
        DEBUG: 500 응답에 상세 에러 메시지 포함 여부.
        ERROR_LOG_PATH: 처리되지 않은 예외를 기록할 로그 파일 경로.
    """

    ALLOWED_ORIGINS: list[str] = [
        "http://127.0.0.1:8080",  # 로컬 개발 (프론트엔드)
        "http://localhost:8080",  # 로컬 개발 (프론트엔드)
    ]

    DB_HOST: str
    DB_PORT: int
    DB_USER: str
    DB_PASSWORD: str
    DB_NAME: str

    DB_POOL_MIN_SIZE: int = 1
    DB_POOL_MAX_SIZE: int = 10
    DB_CONNECT_TIMEOUT: int = 5

    # 프로덕션에서는 False로 설정하여 상세 에러 메시지 노출 방지
    DEBUG: bool = True

    ERROR_LOG_PATH: str = "server_error.log"

    TRUSTED_PROXIES: set[str] = set()  # 프로덕션에서 nginx 등의 프록시 IP 설정 필요

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()  # type: ignore[call-arg]  # pydantic-settings는 .env에서 환경 변수를 불러옴.
