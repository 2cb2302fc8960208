from __future__ import annotations

from enum import Enum


class PipelineStatus(str, Enum):
    INJECTED = "injected"
    DISABLED = "disabled"
    NO_INPUT = "no_input"
    NO_TRIGGER = "no_trigger"
    NO_CREDENTIAL = "no_credential"
    NETWORK_FAILURE = "network_failure"
    EMPTY_EXTRACTION = "empty_extraction"
    ERROR = "error"


class WebSearchError(Exception):
    """Base for per-turn aborts. None of these are fatal to the host."""

    status: PipelineStatus = PipelineStatus.ERROR


class WebSearchDisabled(WebSearchError):
    status = PipelineStatus.DISABLED


class NoInputError(WebSearchError):
    status = PipelineStatus.NO_INPUT


class NoTriggerError(WebSearchError):
    status = PipelineStatus.NO_TRIGGER


class NoCredentialError(WebSearchError):
    status = PipelineStatus.NO_CREDENTIAL


class SearchRequestError(WebSearchError):
    status = PipelineStatus.NETWORK_FAILURE


class EmptyExtractionError(WebSearchError):
    status = PipelineStatus.EMPTY_EXTRACTION
