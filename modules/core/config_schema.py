"""
Configuration Schemas.

Pydantic models defining the expected structure of the console
configuration file (~/.migconsole by default). Used by load_console_config
to validate the file at startup. Unknown keys or wrong types raise a clear
ValidationError before any request is made.

    ConsoleConfigSchema
        api      → ApiSchema      (required: url)
        logging  → LoggingSchema  (optional, defaults below)
"""

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# api
# =============================================================================


class ApiSchema(_StrictBase):
    url: str = Field(min_length=1)
    timeout: PositiveFloat = 30.0


# =============================================================================
# logging
# =============================================================================


class FileHandlerSchema(_StrictBase):
    enabled: bool = False
    path: str = "~/.migconsole.log"
    max_bytes: int = 10485760
    backup_count: int = 3


class LoggingSchema(_StrictBase):
    level: str = "WARNING"
    format: str = "console"
    file: FileHandlerSchema = Field(default_factory=FileHandlerSchema)


# =============================================================================
# top level
# =============================================================================


class ConsoleConfigSchema(_StrictBase):
    api: ApiSchema
    logging: LoggingSchema = Field(default_factory=LoggingSchema)
