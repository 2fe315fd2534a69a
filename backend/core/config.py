from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DEBUG: bool = True
    ENVIRONMENT: str = "development"  # production, staging, development, test
    LOG_LEVEL: str = "INFO"

    # 1. 서버 설정
    API_PREFIX: str = "/api"
    PORT: int = 3000

    # 2. 데이터 레이어 설정
    # supabase: 호스팅 DB (PostgREST), database: SQLAlchemy (로컬 개발/테스트용)
    STORAGE_BACKEND: Literal["supabase", "database"] = "supabase"
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    GUESTBOOK_TABLE: str = "guestbook"

    # STORAGE_BACKEND=database 일 때만 사용
    # 로컬에서는 sqlite 파일, 배포 시 postgresql+asyncpg://... 로 덮어쓰기
    DATABASE_URL: str = "sqlite+aiosqlite:///./guestbook.db"

    # 3. Observability
    NTFY_URL: str = "https://ntfy.sh"
    NTFY_TOPIC: str = "guestbook_dev_errors"
    NTFY_ENABLED: bool = False

    @property
    def ASYNC_DATABASE_URL(self) -> str:
        url = self.DATABASE_URL.replace("postgres://", "postgresql://")
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    @property
    def SUPABASE_REST_URL(self) -> str:
        return f"{self.SUPABASE_URL.rstrip('/')}/rest/v1/{self.GUESTBOOK_TABLE}"

    model_config = SettingsConfigDict(
        # OS 환경변수가 1순위, 없으면 .env 파일을 읽습니다.
        env_file = ".env",
        # .env 파일에 정의되지 않은 추가 변수가 있어도 에러 내지 않음
        extra = "ignore"
    )

settings = Settings()
