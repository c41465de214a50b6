"""Settings from environment variables (optionally a .env file) and service wiring."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from neo4j import GraphDatabase

from userdir.application import DirectoryService, FixedDelay
from userdir.application.retry import CREATE_RETRY_DELAY
from userdir.infrastructure.memory_repository import InMemoryUserStore
from userdir.infrastructure.persistence import Neo4jUserStore, ensure_user_id_constraint

logger = logging.getLogger(__name__)

# Repo root: from src/userdir/infrastructure/config.py go up to repo root.
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent.parent

STORE_NEO4J = "neo4j"
STORE_MEMORY = "memory"


@dataclass(frozen=True)
class Settings:
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"
    retry_delay: float = CREATE_RETRY_DELAY
    store: str = STORE_NEO4J


def load_env_file() -> Path | None:
    """Load .env from repo root or current dir. Returns the file loaded, if any."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environ (default: os.environ). Unset variables keep their defaults."""
    env = os.environ if environ is None else environ
    raw_delay = env.get("USERDIR_RETRY_DELAY", "").strip()
    try:
        retry_delay = float(raw_delay) if raw_delay else CREATE_RETRY_DELAY
    except ValueError:
        raise ValueError(f"USERDIR_RETRY_DELAY must be a number, got {raw_delay!r}") from None
    if retry_delay < 0:
        raise ValueError(f"USERDIR_RETRY_DELAY must be non-negative, got {raw_delay!r}")
    store = env.get("USERDIR_STORE", STORE_NEO4J).strip().lower() or STORE_NEO4J
    if store not in (STORE_NEO4J, STORE_MEMORY):
        raise ValueError(f"USERDIR_STORE must be {STORE_NEO4J!r} or {STORE_MEMORY!r}, got {store!r}")
    return Settings(
        neo4j_uri=env.get("NEO4J_URI", "bolt://localhost:7687").strip(),
        neo4j_user=env.get("NEO4J_USER", "neo4j").strip(),
        neo4j_password=env.get("NEO4J_PASSWORD", "password").strip(),
        retry_delay=retry_delay,
        store=store,
    )


def get_driver(settings: Settings):
    return GraphDatabase.driver(
        settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
    )


def build_service(settings: Settings, driver: object | None = None) -> DirectoryService:
    """Wire a DirectoryService to the configured store. The caller owns (and closes) the driver."""
    if settings.store == STORE_MEMORY:
        store = InMemoryUserStore()
    else:
        if driver is None:
            raise ValueError("A Neo4j driver is required when USERDIR_STORE is 'neo4j'.")
        ensure_user_id_constraint(driver)
        store = Neo4jUserStore(driver)
    logger.info("Directory service using %s store, retry delay %ss", settings.store, settings.retry_delay)
    return DirectoryService(store, retry_policy=FixedDelay(settings.retry_delay))
