"""Data models for caption tracks and transcript segments."""

from urllib.parse import quote

from pydantic import BaseModel, Field


class TranscriptConfig(BaseModel):
    model_config = {"frozen": True}

    lang: str | None = None
    proxy: str | None = None


class CaptionTrack(BaseModel):
    language_code: str
    base_url: str
    name: str = ""
    kind: str | None = None

    @property
    def is_generated(self) -> bool:
        return self.kind == "asr"


class TranscriptSegment(BaseModel):
    model_config = {"frozen": True}

    text: str
    offset_ms: int = Field(ge=0)
    duration_ms: int = Field(ge=0)
    lang: str


class ProxyAuth(BaseModel):
    username: str
    password: str


class ProxyConfig(BaseModel):
    protocol: str
    host: str
    port: int
    auth: ProxyAuth | None = None

    @property
    def url(self) -> str:
        """Render the descriptor as a proxy URL httpx understands."""
        credentials = ""
        if self.auth:
            credentials = (
                f"{quote(self.auth.username, safe='')}:"
                f"{quote(self.auth.password, safe='')}@"
            )
        return f"{self.protocol}://{credentials}{self.host}:{self.port}"
