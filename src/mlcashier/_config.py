from pydantic import BaseModel, Field, HttpUrl, field_validator

from ._utils.constants import DEFAULT_TIMEOUT


class Config(BaseModel):
    base_url: str
    api_key: str = Field(min_length=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    debug: bool = False

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        url_value = HttpUrl(url=value)
        assert url_value.host, "Invalid URL"
        return str(value).rstrip("/")
