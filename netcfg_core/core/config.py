from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from netcfg_core import constants


class Settings(BaseSettings):
    API_V1_STR: str = constants.API_V1_STR

    PROJECT_NAME: str = constants.PROJECT_NAME

    PROJECT_DESCRIPTION: str = constants.PROJECT_DESCRIPTION

    TAGS_METADATA: list = [
        {
            "name": "interfaces",
            "description": "Edit interface definitions and render the interfaces file",
        },
    ]

    # no file logging unless a directory is given
    LOG_DIR: Optional[str] = None

    DEFAULT_MTU: str = constants.DEFAULT_MTU

    INITIAL_INTERFACE_NAME: str = constants.INITIAL_INTERFACE_NAME

    RATE_LIMIT: str = "90/minute"

    model_config = SettingsConfigDict(case_sensitive=True, env_prefix="NETCFG_CORE_")


settings = Settings()

# when app is created, endpoints will be stored here for api landing page
endpoints = []
