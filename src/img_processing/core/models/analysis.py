"""Response models for the analysis endpoints."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class LabelScore(BaseModel):
    """A single label with its independent confidence score."""

    model_config = ConfigDict(frozen=True)

    label: StrictStr = Field(..., description="Predicted label")
    score: float = Field(..., description="Confidence in [0, 1]")


class ClassificationResult(BaseModel):
    """Result of classifying an image.

    Scores are per-label probabilities and are not guaranteed to sum to 1.
    """

    model_config = ConfigDict(frozen=True)

    main_label: StrictStr = Field(..., description="Most likely label")
    main_score: float | None = Field(None, description="Confidence of the main label")
    secondary_labels: list[LabelScore] = Field(
        default_factory=list,
        description="Other candidate labels, most likely first",
    )


class VisualizationResult(BaseModel):
    """Free-text answer to a question asked about an image."""

    model_config = ConfigDict(frozen=True)

    answer: StrictStr = Field(..., description="Model answer to the prompt")
