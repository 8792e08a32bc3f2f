# textsplit/config/base.py

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SplitterSettings(BaseSettings):
    """
    Defaults shared by all text splitters.
    Values can be overridden through environment variables or a .env file.
    """

    # Chunk sizing defaults used by the splitter factory
    DEFAULT_CHUNK_SIZE: int = Field(default=1000, gt=0)
    DEFAULT_CHUNK_OVERLAP: int = Field(default=200, ge=0)

    # Tokenizer Configuration
    DEFAULT_ENCODING_NAME: str = "gpt2"

    # Observability
    ENABLE_METRICS: bool = True
    SLOW_SPLIT_THRESHOLD_SECONDS: float = 1.0  # Splits slower than this are logged at WARNING

    # Pydantic model config
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")
