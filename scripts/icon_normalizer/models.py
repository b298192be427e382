"""Icon data models shared by the classifier, rewriter and pipeline."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ColorMode(str, Enum):
    """How an icon's colors are treated when it is normalized."""

    MONOCHROME = "monochrome"
    COLORED = "colored"
    MULTICOLOR = "multicolor"
    HYBRID = "hybrid"


class RawIcon(BaseModel):
    """An SVG file as read from the source directory."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="File name without the .svg extension")
    source_markup: str = Field(..., description="Unmodified SVG markup")


class NormalizedIcon(BaseModel):
    """An icon whose colors have been classified and rewritten."""

    model_config = ConfigDict(frozen=True)

    name: str
    slug: str
    component_name: str
    inner_markup: str = Field(..., description="Shape markup with the <svg> wrapper removed")
    view_box: str
    color_mode: ColorMode
    fillable: bool = Field(..., description="Whether the wrapper should fill with the caller color")
    optimized: bool = Field(True, description="False when the optimizer failed and the original was used")


class BatchResult(BaseModel):
    """Outcome of normalizing a batch of icons."""

    icons: list[NormalizedIcon] = Field(default_factory=list)
    skipped: dict[str, str] = Field(default_factory=dict, description="Icon name -> error message")
