"""Mock admission control provider for testing."""

from dishka import Scope, provide

from recipebox.adapter.ratelimit import AdmissionControl, AllowAllAdmissionControl
from recipebox.util.di.infrastructure.admission import AdmissionProvider


class MockAdmissionProvider(AdmissionProvider):
    """Admits every request so tests are not rate limited."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_admission_control(self) -> AdmissionControl:
        """Provide allow-all admission control."""
        return AllowAllAdmissionControl()
