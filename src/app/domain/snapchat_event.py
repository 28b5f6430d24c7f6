"""Modelos de wire do Snapchat Conversions API (CAPI v3).

Campos opcionais ficam None e são omitidos na serialização.
Referência de parâmetros:
https://developers.snap.com/api/marketing-api/Conversions-API/Parameters
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.constants.snapchat import ACTION_SOURCE_WEB


class SnapchatUserData(BaseModel):
    """Dados de usuário para matching no provider.

    PII (email, telefone, nome, etc.) chega aqui já em SHA-256.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = Field(None, alias="em")
    phone_number: str | None = Field(None, alias="ph")
    first_name: str | None = Field(None, alias="fn")
    last_name: str | None = Field(None, alias="ln")
    date_of_birth: str | None = Field(None, alias="db")
    gender: str | None = Field(None, alias="ge")
    city: str | None = Field(None, alias="ct")
    state: str | None = Field(None, alias="st")
    zip_code: str | None = Field(None, alias="zp")
    country: str | None = None

    external_id: str | None = None
    client_ip_address: str | None = None
    client_user_agent: str | None = None
    sc_click_id: str | None = None
    sc_cookie1: str | None = None

    def has_identity(self) -> bool:
        """True se email ou telefone estão presentes."""
        return self.email is not None or self.phone_number is not None


class SnapchatEvent(BaseModel):
    """Evento individual enviado ao CAPI."""

    event_name: str = Field(..., min_length=1)
    event_time: int
    user_data: SnapchatUserData = Field(default_factory=SnapchatUserData)
    custom_data: dict[str, Any] | None = Field(default_factory=dict)
    event_source_url: str | None = None
    event_id: str
    action_source: str = ACTION_SOURCE_WEB


class SnapchatPayload(BaseModel):
    """Corpo da requisição ao CAPI.

    Credenciais ficam fora do corpo serializado; aparecem apenas na URL.
    """

    data: list[SnapchatEvent] = Field(default_factory=list)
    access_token: str = Field(..., exclude=True)
    pixel_id: str = Field(..., exclude=True)
    test_event_code: str | None = Field(None, exclude=True)

    def to_wire_dict(self) -> dict[str, Any]:
        """Converte para dict no formato do CAPI (aliases, sem None)."""
        return self.model_dump(by_alias=True, exclude_none=True)
