"""Operation timeout configuration schema."""
from datetime import timedelta

from pydantic import BaseModel, Field, field_validator


class TimeoutsConfig(BaseModel):
    """Per-operation deadlines, in minutes."""

    create_minutes: int = Field(30, description="Create deadline")
    read_minutes: int = Field(5, description="Read deadline")
    update_minutes: int = Field(30, description="Update deadline")
    delete_minutes: int = Field(30, description="Delete deadline")
    customize_diff_minutes: int = Field(30, description="Plan-time validation deadline")

    @field_validator("create_minutes", "read_minutes", "update_minutes",
                     "delete_minutes", "customize_diff_minutes")
    @classmethod
    def validate_minutes(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Timeout must be at least 1 minute")
        return v

    @property
    def create(self) -> timedelta:
        return timedelta(minutes=self.create_minutes)

    @property
    def read(self) -> timedelta:
        return timedelta(minutes=self.read_minutes)

    @property
    def update(self) -> timedelta:
        return timedelta(minutes=self.update_minutes)

    @property
    def delete(self) -> timedelta:
        return timedelta(minutes=self.delete_minutes)

    @property
    def customize_diff(self) -> timedelta:
        return timedelta(minutes=self.customize_diff_minutes)
