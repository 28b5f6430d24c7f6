"""App: orquestração, casos de uso e contratos.

Subpastas:
- bootstrap/: inicialização (logging, validação de settings)
- use_cases/: entry points de tradução por tipo de evento
- protocols/: modelo de eventos do host e descritor de requisição
- domain/: modelos de wire do provider
- observability/: correlation_id para logs estruturados
- constants/: constantes da aplicação

Padrão: app executa; api adapta; config configura; utils apoia.
"""
