from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "A tool using mw_api_kit"


class ClientConfiguration(BaseModel):
    """
    Immutable per-client configuration.

    A client copies nothing out of this object and never mutates it, so
    swapping the factory default never affects clients already built.
    """

    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="Value of the User-Agent header sent with every request.",
    )

    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Connect/read timeout in seconds for the HTTP transport.",
    )

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )


class Settings(BaseSettings):
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 30.0

    model_config = SettingsConfigDict(
        env_prefix="MW_CLIENT_",
        env_file=".env",
        extra="ignore"
    )

    def to_configuration(self) -> ClientConfiguration:
        return ClientConfiguration(user_agent=self.user_agent, timeout=self.timeout)

settings = Settings()
