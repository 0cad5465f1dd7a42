from dataclasses import dataclass

from common.config.env import get_env_int, get_env_str


@dataclass(frozen=True)
class MysqlConfig:
    """Connection settings for opening MySQL metadata sources."""

    host: str
    port: int
    user: str
    password: str
    database: str
    connect_timeout_seconds: int = 10

    @classmethod
    def from_env(cls) -> "MysqlConfig":
        """Load MySQL connection settings from environment variables."""
        return cls(
            host=get_env_str("DB_HOST", "127.0.0.1"),
            port=get_env_int("DB_PORT", 3306),
            user=get_env_str("DB_USER", "root"),
            password=get_env_str("DB_PASS", ""),
            database=get_env_str("DB_NAME", "test"),
            connect_timeout_seconds=get_env_int("DB_CONNECT_TIMEOUT_SECS", 10),
        )
