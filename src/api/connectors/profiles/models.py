"""Modelo do corpo retornado pela Profile API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from utils.errors import RetryError

if TYPE_CHECKING:
    import httpx


class ProfileRecord(BaseModel):
    """Traits de um user ou account, mais o groupId associado ao user."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    traits: dict[str, Any] = Field(
        default_factory=dict,
        description="Traits do perfil; valores repassados sem transformação.",
    )
    group_id: str | int | None = Field(
        default=None,
        alias="groupId",
        description="Account associado ao user (ausente para accounts).",
    )

    @field_validator("traits", mode="before")
    @classmethod
    def _null_traits_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def from_response(cls, response: httpx.Response) -> ProfileRecord:
        """Parseia o JSON de uma resposta 200 da Profile API.

        Raises:
            RetryError: Corpo não é JSON ou não tem o formato esperado
        """
        try:
            body = response.json()
        except ValueError as exc:
            raise RetryError("profile_response_invalid_json") from exc

        try:
            return cls.model_validate(body)
        except PydanticValidationError as exc:
            raise RetryError("profile_response_invalid_shape") from exc
