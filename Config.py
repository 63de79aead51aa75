"""
Configuration Management For Webhook Relay.
Uses Environment Variables With Sensible Defaults For Production Deployment.
"""

import os
from typing import List, Optional
from dataclasses import dataclass, field


def parse_allowed_ids(raw: Optional[str]) -> List[int]:
    """
    Parse A Comma Separated List Of Telegram User IDs.

    Args:
        raw: Value Of ALLOWED_USER_IDS, e.g. "123, 456"

    Returns:
        List Of Integer IDs, Blank Entries Ignored
    """
    if not raw:
        return []

    ids = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.append(int(part))
        except ValueError:
            raise ValueError(f"Invalid Telegram User ID In ALLOWED_USER_IDS: {part!r}")
    return ids


@dataclass
class DatabaseConfig:
    """Database Configuration Settings."""
    host: str = "127.0.0.1"
    user: str = "root"
    password: str = ""
    name: str = "Webhook_Relay"
    port: int = 3306

    @classmethod
    def from_env(cls) -> 'DatabaseConfig':
        """Create Database Config From Environment Variables."""
        return cls(
            host=os.getenv('DB_HOST', '127.0.0.1'),
            user=os.getenv('DB_USER', 'root'),
            password=os.getenv('DB_PASSWORD', ''),
            name=os.getenv('DB_NAME', 'Webhook_Relay'),
            port=int(os.getenv('DB_PORT', '3306'))
        )


@dataclass
class TelegramConfig:
    """Telegram Bot Configuration Settings."""
    token: str
    webhook_secret: Optional[str] = None
    allowed_user_ids: List[int] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> 'TelegramConfig':
        """Create Telegram Config From Environment Variables."""
        token = os.getenv('TELEGRAM_BOT_TOKEN')
        if not token:
            raise ValueError("TELEGRAM_BOT_TOKEN Environment Variable Is Required")

        return cls(
            token=token,
            webhook_secret=os.getenv('TELEGRAM_WEBHOOK_SECRET') or None,
            allowed_user_ids=parse_allowed_ids(os.getenv('ALLOWED_USER_IDS'))
        )


@dataclass
class GitHubConfig:
    """GitHub Webhook Configuration Settings."""
    webhook_secret: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'GitHubConfig':
        """Create GitHub Config From Environment Variables."""
        return cls(webhook_secret=os.getenv('GITHUB_WEBHOOK_SECRET') or None)


@dataclass
class ServerConfig:
    """Server Configuration Settings."""
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    webhook_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'ServerConfig':
        """Create Server Config From Environment Variables."""
        return cls(
            host=os.getenv('SERVER_HOST', '0.0.0.0'),
            port=int(os.getenv('SERVER_PORT', '5000')),
            debug=os.getenv('DEBUG', 'False').lower() == 'true',
            webhook_url=os.getenv('WEBHOOK_URL')
        )


@dataclass
class Config:
    """Main Configuration Class."""
    database: DatabaseConfig
    telegram: TelegramConfig
    github: GitHubConfig
    server: ServerConfig

    @classmethod
    def from_env(cls) -> 'Config':
        """Create Complete Config From Environment Variables."""
        return cls(
            database=DatabaseConfig.from_env(),
            telegram=TelegramConfig.from_env(),
            github=GitHubConfig.from_env(),
            server=ServerConfig.from_env()
        )


# Global Config Instance
config = Config.from_env()
