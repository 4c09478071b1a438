"""Domain-specific exception classes for the campaign wizard."""

from campaign_wizard.domain.types import ContentType, Platform


class WizardError(Exception):
    """Base class for all domain errors in the campaign wizard."""


class InvalidContentTypeError(WizardError):
    """Raised when a content type is not valid for the draft's platform.

    Attributes:
        platform: The platform the content type was assigned to.
        content_type: The invalid content type.
    """

    def __init__(self, platform: Platform | None, content_type: ContentType) -> None:
        self.platform = platform
        self.content_type = content_type
        super().__init__(
            f"{content_type} is not a valid content type for {platform or 'an unset platform'}"
        )


class ReadOnlyFieldError(WizardError):
    """Raised when a partial update tries to write a derived draft field."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"'{field}' is derived and cannot be set directly")


class WizardClosedError(WizardError):
    """Raised when a closed wizard session is mutated."""


class PayloadValidationError(WizardError):
    """Raised when a draft cannot be composed into a valid campaign request.

    Attributes:
        errors: Human-readable messages, one per failed rule.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("Validation errors:\n" + "\n".join(self.errors))


class CampaignSubmissionError(WizardError):
    """Raised when the campaign-creation backend rejects or fails a request.

    Attributes:
        status_code: HTTP status of the response, if one was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
