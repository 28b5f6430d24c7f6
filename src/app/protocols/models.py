"""Contratos do modelo de eventos do host e do descritor de requisição.

O modelo de evento genérico pertence ao pipeline de coleta (host). Estes
dataclasses apenas espelham os campos consumidos pelo componente.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.constants.snapchat import Consent, EventType, HttpMethod

# Lista ordenada de pares chave/valor (settings e propriedades)
Dict = list[tuple[str, str]]


@dataclass(frozen=True, slots=True)
class PageData:
    """Atributos de página do evento."""

    name: str = ""
    category: str = ""
    keywords: list[str] = field(default_factory=list)
    title: str = ""
    url: str = ""
    path: str = ""
    search: str = ""
    referrer: str = ""
    properties: Dict = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class TrackData:
    """Atributos de um evento customizado (track)."""

    name: str = ""
    products: list[Dict] = field(default_factory=list)
    properties: Dict = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class UserData:
    """Identificadores e propriedades do usuário."""

    user_id: str = ""
    anonymous_id: str = ""
    edgee_id: str = ""
    properties: Dict = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Client:
    """Contexto do cliente (navegador)."""

    ip: str = ""
    locale: str = ""
    timezone: str = ""
    user_agent: str = ""
    os_name: str = ""
    os_version: str = ""
    screen_width: int = 0
    screen_height: int = 0
    screen_density: float = 0.0
    continent: str = ""
    country_code: str = ""
    country_name: str = ""
    region: str = ""
    city: str = ""


@dataclass(frozen=True, slots=True)
class Campaign:
    """Parâmetros de campanha (UTM)."""

    name: str = ""
    source: str = ""
    medium: str = ""
    term: str = ""
    content: str = ""
    creative_format: str = ""
    marketing_tactic: str = ""


@dataclass(frozen=True, slots=True)
class Session:
    """Dados de sessão do visitante."""

    session_id: str = ""
    previous_session_id: str = ""
    session_count: int = 0
    session_start: bool = False
    first_seen: int = 0
    last_seen: int = 0


@dataclass(frozen=True, slots=True)
class Context:
    """Contexto completo anexado a cada evento."""

    page: PageData = field(default_factory=PageData)
    user: UserData = field(default_factory=UserData)
    client: Client = field(default_factory=Client)
    campaign: Campaign = field(default_factory=Campaign)
    session: Session = field(default_factory=Session)


EventData = PageData | TrackData | UserData


@dataclass(frozen=True, slots=True)
class Event:
    """Evento genérico produzido pelo pipeline de coleta.

    Attributes:
        uuid: Identificador único (usado para deduplicação no provider)
        timestamp: Segundos desde epoch
        event_type: Tipo do evento (page|track|user)
        data: Payload específico do tipo
        context: Contexto de página, usuário e cliente
        consent: Consentimento explícito ou None quando ausente
    """

    uuid: str
    timestamp: int
    event_type: EventType
    data: EventData
    context: Context = field(default_factory=Context)
    consent: Consent | None = None
    timestamp_millis: int = 0
    timestamp_micros: int = 0


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Requisição HTTP pronta para o transporte do host.

    Nenhuma chamada de rede é feita pelo componente.
    """

    method: HttpMethod
    url: str
    headers: list[tuple[str, str]]
    body: str
    forward_client_headers: bool = True

    def to_dict(self) -> dict[str, object]:
        """Converte para dict serializável (ex: saída de CLI)."""
        return {
            "method": str(self.method),
            "url": self.url,
            "headers": [list(header) for header in self.headers],
            "body": self.body,
            "forward_client_headers": self.forward_client_headers,
        }
