"""API: camada de borda HTTP.

Responsabilidades:
- Receber {action, payload} e delegar ao ActionDispatcher
- Converter erros tipados em respostas {error} com status HTTP
- CORS, correlation_id e health checks

NÃO PODE conter: prompts, regras de fallback, chamadas ao provedor.
"""
