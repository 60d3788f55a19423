from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path

DEFAULT_SCHEMA_NAME = "public"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    output_dir: Path = Field(default=Path("./out"), alias="SPANNER_DDL_OUTPUT_DIR")
    validate_types: bool = Field(default=False, alias="SPANNER_DDL_VALIDATE_TYPES")
    log_level: str = Field(default="WARNING", alias="SPANNER_DDL_LOG_LEVEL")

    # 테이블 note가 이 문자열로 시작하면 COMMENT가 아니라 INTERLEAVE 지시어로 사용
    interleave_marker: str = Field(default="INTERLEAVE IN PARENT", alias="SPANNER_DDL_INTERLEAVE_MARKER")

settings = Settings()
