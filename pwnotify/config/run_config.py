"""Configuration models for a password expiration run."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DirectoryConfig(BaseModel):
    """Connection settings for the LDAP directory source."""

    model_config = ConfigDict(frozen=True)

    uri: str
    base_dn: str
    bind_dn: str = ""
    bind_password: str = ""
    search_filter: str = "(&(objectCategory=person)(objectClass=user))"
    timeout: int = Field(default=30, gt=0)

    @field_validator("uri", "base_dn")
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("value is required")
        return v.strip()


class RunConfig(BaseModel):
    """Settings for one notification run. Never mutated once loaded."""

    model_config = ConfigDict(frozen=True)

    smtp_host: str
    admin_email: str
    password_policy_days: int = Field(gt=0)
    upper_threshold_days: int = Field(ge=0)
    lower_threshold_days: int = Field(ge=0)
    email_from: str
    email_subject: str
    email_body_template: str
    exclusions: frozenset[str] = Field(default_factory=frozenset)

    smtp_port: int = Field(default=25, gt=0)
    report_path: str = "PasswordExpiryReport.csv"
    admin_subject: str = "Password Expiration Report"
    directory: Optional[DirectoryConfig] = None

    @field_validator(
        "smtp_host",
        "admin_email",
        "email_from",
        "email_subject",
        "email_body_template",
        "report_path",
        "admin_subject",
    )
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("value is required")
        return v

    @field_validator("exclusions")
    def drop_blank_exclusions(cls, v: frozenset[str]) -> frozenset[str]:
        return frozenset(name.strip() for name in v if name and name.strip())

    def threshold_for(self, afternoon: bool) -> int:
        """Warning window in days: upper in the afternoon, lower otherwise."""
        return self.upper_threshold_days if afternoon else self.lower_threshold_days

    def get_report_path(self) -> Path:
        """Get expanded report path."""
        return Path(self.report_path).expanduser()
