import logging

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    log_level: str = "INFO"
    default_base_iri: str = "https://placeholder.kg"
    id_base_iri: str = ""

    model_config = SettingsConfigDict(env_prefix="KG_LITERAL_", env_file=".env", extra="ignore")

    @model_validator(mode="after")
    def default_id_base_iri(self) -> "Settings":
        if not self.id_base_iri:
            self.id_base_iri = f"{self.default_base_iri}/id/"
        return self


# noinspection PyArgumentList
settings = Settings()

logger.debug(f"Default base IRI: {settings.default_base_iri}")
logger.debug(f"Id base IRI: {settings.id_base_iri}")
logger.debug(f"Log level: {settings.log_level}")
