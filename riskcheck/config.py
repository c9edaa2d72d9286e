"""
Risk Check Configuration — pydantic-settings based.

All settings are read from environment variables or .env file.
Every value has a default so the service starts without any environment;
lead notification and geocoding degrade to logging / empty results when
their keys are missing.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Lead notification ──
    emailjs_service_id: str = Field(default="", description="EmailJS service id")
    emailjs_template_id: str = Field(default="", description="EmailJS template id")
    emailjs_public_key: str = Field(default="", description="EmailJS public key (user_id)")
    emailjs_endpoint: str = Field(
        default="https://api.emailjs.com/api/v1.0/email/send",
        description="EmailJS REST send endpoint",
    )
    webhook_url: str = Field(
        default="", description="Fallback webhook (Zapier, Make.com, n8n, ...)"
    )
    notification_recipient: str = Field(
        default="hysa@blockalarm.de", description="Inbox receiving lead notifications"
    )

    # ── Geocoding ──
    google_geocoding_api_key: str = Field(default="", description="Google Geocoding key")
    google_maps_api_key: str = Field(default="", description="Google Static Maps key")
    nominatim_user_agent: str = Field(
        default="BlockalarmCheck/1.0 (hysa@blockalarm.de)",
        description="User-Agent sent to Nominatim (required by its usage policy)",
    )
    http_timeout: float = Field(default=10.0, description="Outbound HTTP timeout in seconds")

    # ── Server ──
    port: int = Field(default=5001, description="Server port")
    host: str = Field(default="0.0.0.0", description="Server bind host")
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # ── Lead log ──
    lead_log_path: str = Field(
        default="leads.jsonl", description="Path to JSON-lines lead log file"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @property
    def emailjs_configured(self) -> bool:
        return bool(
            self.emailjs_service_id and self.emailjs_template_id and self.emailjs_public_key
        )


# Singleton instance — imported by other modules
settings = Settings()
