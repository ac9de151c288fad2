"""Backend settings read from environment variables (.env is loaded by api.main)."""

import os
from dataclasses import dataclass

STORE_MEMORY = "memory"
STORE_NEO4J = "neo4j"
STORES = (STORE_MEMORY, STORE_NEO4J)


def _env(name: str, default: str) -> str:
    return (os.environ.get(name) or default).strip()


@dataclass(frozen=True)
class Settings:
    store: str = STORE_MEMORY
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"
    default_region: str | None = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.store not in STORES:
            raise ValueError(
                f"PHONEBOOK_STORE must be one of {', '.join(STORES)}, got {self.store!r}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        region = _env("PHONEBOOK_DEFAULT_REGION", "").upper() or None
        return cls(
            store=_env("PHONEBOOK_STORE", STORE_MEMORY).lower(),
            neo4j_uri=_env("NEO4J_URI", "bolt://localhost:7687"),
            neo4j_user=_env("NEO4J_USER", "neo4j"),
            neo4j_password=_env("NEO4J_PASSWORD", "password"),
            default_region=region,
            log_level=_env("LOG_LEVEL", "INFO").upper(),
        )
