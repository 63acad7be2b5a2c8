"""Root configuration schema.

This module contains the root DesignConfiguration model that ties together
all configuration sections.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from showers.application.config.schemas.base import SUPPORTED_VERSIONS
from showers.application.config.schemas.chain_schema import ChainConfigSchema
from showers.application.config.schemas.options_schema import (
    DoorConfigSchema,
    OptionsConfigSchema,
    ViewConfigSchema,
)
from showers.application.config.schemas.rules_schema import RulesConfigSchema


class DesignConfiguration(BaseModel):
    """Root configuration model for shower glass design files.

    A file describes a panel chain, a single laser-measured door, or both.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        chain: Panel chain configuration
        options: Fabrication options for the chain
        view: Perspective view settings
        rules: Optional fabrication rule overrides
        door: Optional laser-measured door (v1.1+)

    Example:
        >>> config = DesignConfiguration(
        ...     schema_version="1.0",
        ...     chain=ChainConfigSchema(
        ...         panels=[PanelConfigSchema(id="d", kind="door", width_mm=700)]
        ...     ),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    chain: ChainConfigSchema | None = Field(
        default=None, description="Panel chain (optional when a door is given)"
    )
    options: OptionsConfigSchema = Field(default_factory=OptionsConfigSchema)
    view: ViewConfigSchema = Field(default_factory=ViewConfigSchema)
    rules: RulesConfigSchema | None = Field(
        default=None, description="Fabrication rule overrides (optional)"
    )
    door: DoorConfigSchema | None = Field(
        default=None, description="Laser-measured door (optional)"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Also allows newer minor versions within the same major version for
        forward compatibility (e.g., 1.3 is accepted if major version 1 is supported).
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version: {v}. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )

    @model_validator(mode="after")
    def validate_has_content(self) -> "DesignConfiguration":
        """Require a chain or a door, and rakes only for known panels."""
        if self.chain is None and self.door is None:
            raise ValueError("Configuration must contain a chain or a door")
        if self.options.rakes:
            known = {p.id for p in self.chain.panels} if self.chain else set()
            unknown = sorted(set(self.options.rakes) - known)
            if unknown:
                raise ValueError(
                    f"Rakes given for unknown panels: {', '.join(unknown)}"
                )
        return self
