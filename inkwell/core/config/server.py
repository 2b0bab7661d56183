"""Listener and rate-limit settings for the HTTP and gRPC frontends.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class ServerSettings(BaseSettings):
    HTTP_HOST: str = "0.0.0.0"
    HTTP_PORT: int = Field(ge=1, le=65535, default=3000)
    GRPC_HOST: str = "0.0.0.0"
    GRPC_PORT: int = Field(ge=1, le=65535, default=50051)

    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_PER_SECOND: int = Field(ge=1, default=10)
    RATE_LIMIT_BURST: int = Field(ge=1, default=20)

    @property
    def http_address(self) -> str:
        return f"{self.HTTP_HOST}:{self.HTTP_PORT}"

    @property
    def grpc_address(self) -> str:
        return f"{self.GRPC_HOST}:{self.GRPC_PORT}"
