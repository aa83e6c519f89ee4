from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from newsai.routing.host_classifier import DEFAULT_PROVIDER_SUFFIXES, DEFAULT_RESERVED_LABELS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='forbid',
    )

    DATABASE_URL: str
    APP_ENV: str = 'development'
    CORS_ORIGINS: str = 'http://localhost:3000'
    TRUST_PROXY_HEADERS: bool = False

    RESERVED_SUBDOMAINS: str = ','.join(sorted(DEFAULT_RESERVED_LABELS))
    PROVIDER_SANDBOX_SUFFIXES: str = ','.join(DEFAULT_PROVIDER_SUFFIXES)
    BLOG_QUERY_PARAM: str = 'blog'

    TENANT_LOOKUP_BACKEND: str = 'database'
    RECORD_STORE_URL: str | None = None
    RECORD_STORE_API_KEY: str | None = None
    RECORD_STORE_TIMEOUT_SECONDS: float = 5.0

    DEMO_TENANT_LABEL: str | None = None
    DEMO_TENANT_NAME: str = 'NEWS AI'

    @field_validator('DATABASE_URL')
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        if not value.startswith(('postgres', 'sqlite')):
            raise ValueError('DATABASE_URL must point to PostgreSQL (or SQLite for local runs)')
        # Bare PostgreSQL URLs would load psycopg2; the installed driver is psycopg 3.
        for prefix in ('postgresql://', 'postgres://'):
            if value.startswith(prefix):
                return 'postgresql+psycopg://' + value[len(prefix) :]
        if value.startswith('postgres') and not value.startswith('postgresql+psycopg://'):
            raise ValueError('DATABASE_URL must use the psycopg driver (postgresql+psycopg://)')
        return value

    @field_validator('TENANT_LOOKUP_BACKEND')
    @classmethod
    def validate_lookup_backend(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {'database', 'rest'}:
            raise ValueError("TENANT_LOOKUP_BACKEND must be 'database' or 'rest'")
        return normalized

    @field_validator('BLOG_QUERY_PARAM')
    @classmethod
    def validate_query_param(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('BLOG_QUERY_PARAM must not be empty')
        return value.strip()

    @model_validator(mode='after')
    def validate_record_store(self) -> 'Settings':
        if self.TENANT_LOOKUP_BACKEND == 'rest' and not (self.RECORD_STORE_URL or '').strip():
            raise ValueError("RECORD_STORE_URL is required when TENANT_LOOKUP_BACKEND is 'rest'")
        return self

    @property
    def cors_origins(self) -> list[str]:
        return [item.strip() for item in self.CORS_ORIGINS.split(',') if item.strip()]

    @property
    def reserved_subdomains(self) -> frozenset[str]:
        return frozenset(item.strip().lower() for item in self.RESERVED_SUBDOMAINS.split(',') if item.strip())

    @property
    def provider_sandbox_suffixes(self) -> tuple[str, ...]:
        return tuple(item.strip().lower() for item in self.PROVIDER_SANDBOX_SUFFIXES.split(',') if item.strip())


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
