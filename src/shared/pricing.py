from typing import Dict, Union

from src.specs.common.enums import GenerationType
from src.specs.common.errors import ConfigurationError
from src.specs.db.creative_usage import CostRecord
from src.specs.http.generate_creative import ImageOptions, VideoOptions

# Cost per generation (for tracking)
COSTS: Dict[str, float] = {
    "dall-e-3-standard": 0.04,
    "dall-e-3-hd": 0.08,
    "dall-e-3-wide": 0.08,
    "dall-e-3-wide-hd": 0.12,
    "gpt-image-mini": 0.015,
    "runway-video": 0.50,  # approximate, per 5-second clip
}

# Both wide DALL-E 3 sizes (1792x1024, 1024x1792) carry this dimension
WIDE_FORMAT_MARKER = "1792"


def image_cost_key(quality: str, size: str) -> str:
    wide = WIDE_FORMAT_MARKER in (size or "")
    if quality == "hd":
        return "dall-e-3-wide-hd" if wide else "dall-e-3-hd"
    return "dall-e-3-wide" if wide else "dall-e-3-standard"


def cost_key_for(gen_type: GenerationType, options: Union[ImageOptions, VideoOptions]) -> str:
    if gen_type == GenerationType.IMAGE and isinstance(options, ImageOptions):
        return image_cost_key(options.quality, options.size)
    if gen_type == GenerationType.VIDEO:
        return "runway-video"
    raise ConfigurationError(f"No cost mapping for {gen_type.value} generation")


def price_for(cost_key: str) -> CostRecord:
    if cost_key not in COSTS:
        raise ConfigurationError(f"No price configured for cost key '{cost_key}'")
    return CostRecord(cost_key=cost_key, cost=COSTS[cost_key])


def estimate_cost(gen_type: GenerationType, options: Union[ImageOptions, VideoOptions]) -> CostRecord:
    return price_for(cost_key_for(gen_type, options))
