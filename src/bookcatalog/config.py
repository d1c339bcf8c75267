"""
Configuration management for the Book Catalog service
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True  # Serve the GraphiQL IDE on GET /graphql

    # Catalog
    seed_data_path: str | None = None  # JSON file replacing the default seed

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "BOOKCATALOG_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_server_url(host: str | None = None, port: int | None = None) -> str:
    """Build the public GraphQL URL announced when the server is ready."""
    host = host or settings.api_host
    if host in ("0.0.0.0", "::"):
        host = "localhost"
    port = port or settings.api_port
    return f"http://{host}:{port}{settings.graphql_path}"
