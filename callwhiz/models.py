"""
CallWhiz Python SDK - Data Models

This module contains the request schemas used to validate payloads before
they are sent, and the response models describing what the API returns.

Request schemas are declarative pydantic models registered in SCHEMAS and
interpreted by a single ``validate`` routine. Validation collects every
problem in the payload instead of stopping at the first one.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional, Tuple, Type
from urllib.parse import urlsplit

from pydantic import (
    AfterValidator,
    BeforeValidator,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationError as PydanticValidationError,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

from callwhiz.config import Limits
from callwhiz.exceptions import ValidationError


# =============================================================================
# Field Types
# =============================================================================

# Optional "+", first digit 1-9, 4 to 15 digits in total
PHONE_NUMBER_PATTERN = r"^\+?[1-9][0-9]{3,14}$"
ALLOWED_URL_SCHEMES = ("http", "https")


def _check_http_url(value: str) -> str:
    if any(char.isspace() for char in value):
        raise PydanticCustomError("url_invalid", "must be a valid uri")
    try:
        parts = urlsplit(value)
    except ValueError:
        raise PydanticCustomError("url_invalid", "must be a valid uri") from None
    if parts.scheme.lower() not in ALLOWED_URL_SCHEMES or not parts.netloc:
        raise PydanticCustomError(
            "url_scheme",
            "must be a valid uri with a scheme matching the http|https pattern",
        )
    return value


def _reject_bool(value: Any) -> Any:
    # bool is an int subclass; True must not pass as 1
    if isinstance(value, bool):
        raise PydanticCustomError("number_type", "must be a number")
    return value


def _parse_boolean(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise PydanticCustomError("bool_type", "must be a boolean")


NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
Number = Annotated[float, BeforeValidator(_reject_bool)]
Integer = Annotated[int, BeforeValidator(_reject_bool)]
Boolean = Annotated[bool, BeforeValidator(_parse_boolean)]
PhoneNumber = Annotated[str, StringConstraints(pattern=PHONE_NUMBER_PATTERN)]
HttpUrl = Annotated[str, StringConstraints(min_length=1), AfterValidator(_check_http_url)]
EventList = Annotated[List[NonEmptyStr], Field(min_length=1)]
ApiKeyName = Annotated[
    str,
    StringConstraints(min_length=1, max_length=Limits.MAX_API_KEY_NAME_LENGTH),
]


# =============================================================================
# Request Schemas
# =============================================================================


class RequestSchema(BaseModel):
    """
    Base class for request payload schemas.

    Unknown fields and explicit nulls are rejected, so a field holding None
    after validation was simply absent from the input.
    """

    model_config = ConfigDict(extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise PydanticCustomError("null_value", "must not be null")
        return value

    def to_payload(self) -> Dict[str, Any]:
        """Dump the validated payload, omitting absent optional fields."""
        payload: Dict[str, Any] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, RequestSchema):
                value = value.to_payload()
            payload[name] = value
        return payload


class UpdateSchema(RequestSchema):
    """Base class for update payloads, which must carry at least one field."""

    @model_validator(mode="after")
    def _require_one_field(self) -> "UpdateSchema":
        if not self.model_fields_set:
            raise PydanticCustomError(
                "min_fields", "payload must have at least one field"
            )
        return self


# Agents


class VoiceConfig(RequestSchema):
    """Text-to-speech settings for an agent."""

    provider: NonEmptyStr
    voice_id: NonEmptyStr
    speed: Number = 1.0
    pitch: Number = 1.0


class LLMConfig(RequestSchema):
    """Language model settings for an agent."""

    provider: NonEmptyStr
    model: NonEmptyStr
    temperature: Number = 0.7
    max_tokens: Integer = 150


class AgentSettings(RequestSchema):
    """Call behaviour settings for an agent."""

    max_call_duration: Integer = 1800  # seconds
    enable_interruptions: Boolean = True
    silence_timeout: Number = 5.0  # seconds
    response_delay: Number = 0.5  # seconds


class VoiceConfigUpdate(RequestSchema):
    provider: Optional[NonEmptyStr] = None
    voice_id: Optional[NonEmptyStr] = None
    speed: Optional[Number] = None
    pitch: Optional[Number] = None


class LLMConfigUpdate(RequestSchema):
    provider: Optional[NonEmptyStr] = None
    model: Optional[NonEmptyStr] = None
    temperature: Optional[Number] = None
    max_tokens: Optional[Integer] = None


class AgentSettingsUpdate(RequestSchema):
    max_call_duration: Optional[Integer] = None
    enable_interruptions: Optional[Boolean] = None
    silence_timeout: Optional[Number] = None
    response_delay: Optional[Number] = None


class AgentCreate(RequestSchema):
    """Payload for creating an agent."""

    name: NonEmptyStr
    description: Optional[NonEmptyStr] = None
    voice: VoiceConfig
    llm: LLMConfig
    prompt: NonEmptyStr
    first_message: Optional[NonEmptyStr] = None
    settings: Optional[AgentSettings] = None
    metadata: Optional[Dict[str, Any]] = None


class AgentUpdate(UpdateSchema):
    """Payload for updating an agent."""

    name: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    voice: Optional[VoiceConfigUpdate] = None
    llm: Optional[LLMConfigUpdate] = None
    prompt: Optional[NonEmptyStr] = None
    first_message: Optional[NonEmptyStr] = None
    settings: Optional[AgentSettingsUpdate] = None
    status: Optional[NonEmptyStr] = None
    metadata: Optional[Dict[str, Any]] = None


# Calls


class CallCreate(RequestSchema):
    """Payload for starting an outbound call."""

    agent_id: NonEmptyStr
    phone_number: PhoneNumber
    context: Optional[Dict[str, Any]] = None
    webhook_url: Optional[HttpUrl] = None
    metadata: Optional[Dict[str, Any]] = None


# Webhooks


class WebhookCreate(RequestSchema):
    """Payload for registering a webhook."""

    url: HttpUrl
    events: EventList
    description: Optional[NonEmptyStr] = None
    agent_ids: Optional[List[NonEmptyStr]] = None
    active: Optional[Boolean] = None
    retry_policy: Optional[Dict[str, Any]] = None
    headers: Optional[Dict[str, str]] = None
    metadata: Optional[Dict[str, Any]] = None


class WebhookUpdate(UpdateSchema):
    """Payload for updating a webhook."""

    url: Optional[HttpUrl] = None
    events: Optional[EventList] = None
    description: Optional[NonEmptyStr] = None
    agent_ids: Optional[List[NonEmptyStr]] = None
    active: Optional[Boolean] = None
    retry_policy: Optional[Dict[str, Any]] = None
    headers: Optional[Dict[str, str]] = None
    metadata: Optional[Dict[str, Any]] = None


# API Keys


class ApiKeyCreate(RequestSchema):
    """Payload for creating an API key."""

    name: ApiKeyName
    description: Optional[NonEmptyStr] = None
    permissions: Optional[List[NonEmptyStr]] = None


SCHEMAS: Dict[Tuple[str, str], Type[RequestSchema]] = {
    ("agent", "create"): AgentCreate,
    ("agent", "update"): AgentUpdate,
    ("call", "create"): CallCreate,
    ("webhook", "create"): WebhookCreate,
    ("webhook", "update"): WebhookUpdate,
    ("api_key", "create"): ApiKeyCreate,
}


def validate(resource: str, operation: str, data: Any) -> Dict[str, Any]:
    """
    Validate a request payload against its schema.

    Args:
        resource: Resource kind ("agent", "call", "webhook", "api_key")
        operation: Operation name ("create" or "update")
        data: Payload to validate

    Returns:
        The normalized payload with defaults filled in

    Raises:
        ValidationError: If the payload is invalid. The message lists every
            problem found, and field_errors maps field paths to messages.
    """
    schema = SCHEMAS.get((resource, operation))
    if schema is None:
        raise ValidationError(f"No schema for {resource} {operation}")

    try:
        model = schema.model_validate(data)
    except PydanticValidationError as exc:
        raise _to_validation_error(exc) from None

    return model.to_payload()


def _to_validation_error(exc: PydanticValidationError) -> ValidationError:
    messages: List[str] = []
    field_errors: Dict[str, str] = {}

    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"])
        if path:
            messages.append(f'"{path}" {error["msg"]}')
            field_errors.setdefault(path, error["msg"])
        else:
            messages.append(error["msg"])

    return ValidationError(
        f"Validation failed: {', '.join(messages)}",
        field_errors=field_errors,
    )


# =============================================================================
# Response Models
# =============================================================================


class ResourceModel(BaseModel):
    """Base class for API resources. Fields the SDK doesn't know are kept."""

    model_config = ConfigDict(extra="allow")


class Agent(ResourceModel):
    """Voice agent."""

    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    voice: Optional[Dict[str, Any]] = None
    llm: Optional[Dict[str, Any]] = None
    prompt: Optional[str] = None
    first_message: Optional[str] = None
    settings: Optional[Dict[str, Any]] = None
    status: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Call(ResourceModel):
    """Voice call record."""

    id: str
    agent_id: Optional[str] = None
    phone_number: Optional[str] = None
    status: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    completed_at: Optional[str] = None


class Webhook(ResourceModel):
    """Webhook subscription."""

    id: str
    url: Optional[str] = None
    events: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    agent_ids: Optional[List[str]] = None
    active: bool = True
    retry_policy: Optional[Dict[str, Any]] = None
    headers: Optional[Dict[str, str]] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ApiKey(ResourceModel):
    """
    API key.

    The secret ``key`` is only present in the response to create_api_key.
    """

    id: str
    name: Optional[str] = None
    key: Optional[str] = None
    description: Optional[str] = None
    permissions: Optional[List[str]] = None
    created_at: Optional[str] = None


class Conversation(ResourceModel):
    """Conversation history of a call."""

    id: str
    agent_id: Optional[str] = None
    call_id: Optional[str] = None
    messages: List[Dict[str, Any]] = Field(default_factory=list)
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
