# =============================================================================
# CONFIGURACAO - Quiz Authoring Service
# =============================================================================

import os
from dataclasses import dataclass, field


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


@dataclass
class QuizConfig:
    """Configuracao centralizada, lida de variaveis de ambiente.

    Attributes:
        environment: development | test | production
        log_level: Nivel do logging raiz
        jwt_secret: Chave HMAC dos tokens de acesso
        jwt_algorithm: Algoritmo JWT
        jwt_expire_minutes: Validade dos tokens emitidos
        allowed_origins: Origens liberadas no CORS
        api_url: Endpoint GraphQL usado pelo cliente
        host: Host do servidor HTTP
        port: Porta do servidor HTTP
    """

    environment: str = "development"
    log_level: str = "INFO"
    jwt_secret: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60
    allowed_origins: list[str] = field(default_factory=lambda: _split_csv(DEFAULT_ORIGINS))
    api_url: str = "http://localhost:8001/graphql"
    host: str = "0.0.0.0"
    port: int = 8001

    @classmethod
    def from_env(cls) -> "QuizConfig":
        """Cria configuracao a partir do ambiente (com defaults)."""
        return cls(
            environment=os.getenv("ENVIRONMENT", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            jwt_secret=os.getenv("JWT_SECRET_KEY", "dev-secret-change-me"),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            jwt_expire_minutes=int(os.getenv("JWT_EXPIRE_MINUTES", "60")),
            allowed_origins=_split_csv(os.getenv("ALLOWED_ORIGINS", DEFAULT_ORIGINS)),
            api_url=os.getenv("QUIZ_API_URL", "http://localhost:8001/graphql"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8001")),
        )
