"""Assessment list view model."""

from medassess.core.exceptions import ServiceError
from medassess.schemas.assessment import Assessment
from medassess.services.assessments import AssessmentService
from medassess.services.filtering import ALL, ASSESSMENT_FILTER


class AssessmentListView:
    """Loaded assessments for one list view, plus derived filter data.

    Deletes are reconciled by re-fetching the list from the store rather
    than removing the entry locally.
    """

    def __init__(self, service: AssessmentService) -> None:
        self.service = service
        self.assessments: list[Assessment] = []
        self.loading = False
        self.error: ServiceError | None = None
        self._closed = False

    async def load(self) -> list[Assessment]:
        """Fetch the authoritative list. Failures are exposed on ``error``."""
        self.loading = True
        self.error = None
        try:
            assessments = await self.service.list_assessments()
        except ServiceError as exc:
            if not self._closed:
                self.error = exc
                self.loading = False
            return self.assessments

        if not self._closed:
            self.assessments = assessments
            self.loading = False
        return self.assessments

    def visible(self, query: str = "", status: str = ALL) -> list[Assessment]:
        return ASSESSMENT_FILTER.apply(self.assessments, query, status)

    def status_options(self) -> list[str]:
        return ASSESSMENT_FILTER.options(self.assessments)

    def status_counts(self) -> dict[str, int]:
        return ASSESSMENT_FILTER.counts(self.assessments)

    async def delete(self, assessment_id: int) -> bool:
        """Delete an assessment and reload the list once the store confirms.

        Raises:
            NotFoundError, ServiceError: From the store; the list is unchanged
        """
        deleted = await self.service.delete_assessment(assessment_id)
        if deleted and not self._closed:
            await self.load()
        return deleted

    def teardown(self) -> None:
        self._closed = True
