"""Generation error types and the primary-provider failure classifier."""

from dataclasses import dataclass

RETRYABLE_STATUS = 503
RETRYABLE_MESSAGE = "overloaded"

ALL_PROVIDERS_FAILED = "All available AI providers failed. Please try again later."

_STATUS_ATTRS = ("status_code", "code", "status")


class GenerationError(Exception):
    """Base class for errors surfaced by the generation orchestrator."""


class PrimaryProviderError(GenerationError):
    """Terminal primary failure; the fallback was not attempted."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Primary AI provider failed: {reason}")


class AllProvidersFailedError(GenerationError):
    """Both providers were tried and neither produced a valid result."""

    def __init__(self):
        super().__init__(ALL_PROVIDERS_FAILED)


@dataclass(frozen=True)
class ClassifiedError:
    error: BaseException
    retryable: bool
    reason: str


def _int_status(value) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _chain(error: BaseException):
    seen = set()
    current = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__


def _own_status(error: BaseException) -> int | None:
    for attr in _STATUS_ATTRS:
        status = _int_status(getattr(error, attr, None))
        if status is not None:
            return status
    return _int_status(getattr(getattr(error, "response", None), "status_code", None))


def status_codes_of(error: BaseException) -> list[int]:
    """HTTP-style statuses on the error and its __cause__ chain, outermost first.

    google-genai errors expose ``code``, openai errors ``status_code``,
    httpx errors ``response.status_code``.
    """
    return [s for s in (_own_status(e) for e in _chain(error)) if s is not None]


def status_code_of(error: BaseException) -> int | None:
    """Outermost HTTP-style status in the chain, if any."""
    statuses = status_codes_of(error)
    return statuses[0] if statuses else None


def classify(error: BaseException) -> ClassifiedError:
    """Decide whether a primary-provider error justifies calling the fallback.

    Narrow allowlist: HTTP 503 anywhere in the __cause__ chain, or a message
    containing "overloaded" (case-sensitive). Everything else is terminal.
    """
    statuses = status_codes_of(error)
    if RETRYABLE_STATUS in statuses:
        return ClassifiedError(error, True, f"service unavailable (status {RETRYABLE_STATUS})")
    if RETRYABLE_MESSAGE in str(error):
        return ClassifiedError(error, True, "provider reported overload")
    if statuses:
        return ClassifiedError(error, False, f"non-retryable status {statuses[0]}")
    return ClassifiedError(error, False, f"non-retryable {type(error).__name__}")


def is_retryable(error: BaseException) -> bool:
    return classify(error).retryable
