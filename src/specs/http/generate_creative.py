from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, Literal, Optional


class GenerateCreativeRequest(BaseModel):
    # type/prompt are checked by the handler so the error message can name them
    type: Optional[Any] = None
    prompt: Optional[str] = None
    customer_id: Optional[str] = None
    options: Optional[Dict[str, Any]] = Field(default_factory=dict)

    @field_validator("customer_id", mode="before")
    @classmethod
    def _numeric_customer_id(cls, v: Any) -> Any:
        # Numeric ids are stored as text in the usage table
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class ImageOptions(BaseModel):
    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    model: str = "dall-e-3"
    size: str = "1024x1024"
    quality: str = "standard"
    style: str = "vivid"


class VideoOptions(BaseModel):
    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    duration: int = 5
    model: str = "gen3a_turbo"


class ImageResult(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    image_url: Optional[str] = None
    revised_prompt: Optional[str] = None
    model: str
    size: str
    quality: str


class VideoResult(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    task_id: str
    status: Literal["processing"] = "processing"
    poll_url: str
    model: str
    duration: int
    note: str = "Video is generating. Poll the task_id endpoint for completion."


class GenerateCreativeResponse(BaseModel):
    """Envelope fields; the generation result is merged alongside them."""

    success: bool = True
    type: Literal["image", "video"]
    cost: float
