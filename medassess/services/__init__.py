"""Application services: record clients, filtering and view models."""

from medassess.services.assessment_form import AssessmentForm, FormState
from medassess.services.assessment_list import AssessmentListView
from medassess.services.assessments import AssessmentService
from medassess.services.library import ProtocolService, ReferenceService
from medassess.services.notifications import LoggingNotifier, NotificationFeed, Notifier

__all__ = [
    "AssessmentForm",
    "FormState",
    "AssessmentListView",
    "AssessmentService",
    "ProtocolService",
    "ReferenceService",
    "Notifier",
    "LoggingNotifier",
    "NotificationFeed",
]
