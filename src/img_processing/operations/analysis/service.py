"""Analysis operations: classification and visual question answering."""

from img_processing.core.models.analysis import ClassificationResult, VisualizationResult
from img_processing.core.utils.constants import image_path
from img_processing.operations.base import BaseService

from .models import VisualizeRequest


class AnalysisService(BaseService):
    """Operations that describe an image instead of producing a new one."""

    def classify(self, *, image_id: str) -> ClassificationResult:
        """Classify the main subject of an image.

        Scores are independent per-label confidences in [0, 1].
        """
        return self._request(
            lambda: self._adapter.post(image_path(image_id, "classify")),
            model=ClassificationResult,
        )

    def visualize(
        self,
        *,
        image_id: str,
        prompt: str,
        model: str | None = None,
    ) -> VisualizationResult:
        """Ask a free-text question about an image."""
        request = VisualizeRequest(prompt=prompt, model=model)
        return self._request(
            lambda: self._adapter.post(
                image_path(image_id, "visualize"),
                json=request.to_payload(),
            ),
            model=VisualizationResult,
        )
