"""
Runtime configuration for script sessions.

Defaults match the engine's console variables; each can be overridden from
the environment (or a .env file):

    TAS_CHECK_MAX_REPLAYS   maximum replays a failing `check` may trigger
    TAS_POS_EPSILON         default `check` position tolerance
    TAS_ANG_EPSILON         default `check` angle tolerance
"""

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CHECK_MAX_REPLAYS = 15
DEFAULT_POS_EPSILON = 0.5
DEFAULT_ANG_EPSILON = 0.2

_ENV_FIELDS = {
    "TAS_CHECK_MAX_REPLAYS": "check_max_replays",
    "TAS_POS_EPSILON": "default_pos_epsilon",
    "TAS_ANG_EPSILON": "default_ang_epsilon",
}


class ScriptConfig(BaseModel):
    """Settings shared by every session of one host process."""

    model_config = ConfigDict(frozen=True)

    check_max_replays: int = Field(default=DEFAULT_CHECK_MAX_REPLAYS, ge=0)
    default_pos_epsilon: float = Field(default=DEFAULT_POS_EPSILON, ge=0)
    default_ang_epsilon: float = Field(default=DEFAULT_ANG_EPSILON, ge=0)

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "ScriptConfig":
        """Build a config from TAS_* environment variables.

        Unset variables keep their defaults. Malformed values raise
        pydantic.ValidationError.
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))
        overrides = {
            field: os.environ[var]
            for var, field in _ENV_FIELDS.items()
            if os.environ.get(var, "").strip()
        }
        return cls.model_validate(overrides)
