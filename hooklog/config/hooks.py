"""Settings for the hooks installed by the command line demo."""

from pydantic import BaseModel, Field, field_validator

from hooklog.levels import level_name, parse_level


class HookSettings(BaseModel):
    print_levels: list[str] = Field(
        default_factory=lambda: ["INFO", "ERROR"],
        description="Levels at which the print hook fires",
    )

    @field_validator("print_levels")
    @classmethod
    def validate_levels(cls, v: list[str]) -> list[str]:
        return [level_name(parse_level(item)) for item in v]

    def print_level_values(self) -> list[int]:
        return [parse_level(item) for item in self.print_levels]
