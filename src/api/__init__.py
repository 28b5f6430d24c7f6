"""API: camada de borda e adapters de providers.

Responsabilidades:
- Normalizar eventos do host para modelos internos
- Aplicar gates de validação (consentimento, identidade)
- Construir payloads e requisições para APIs externas

Subpastas:
- normalizers/: conversão de payloads externos → modelos internos
- payload_builders/: construção de payloads para APIs externas
- validators/: validação de eventos antes da tradução

NÃO PODE conter: transporte HTTP, retry, orquestração de use cases.
"""
