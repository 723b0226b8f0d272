"""App: composição, casos de uso e infraestrutura do NetworkAI.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: Contact, Interaction, Tag, LogEntry
- use_cases/: fluxos do app que usam o assistente
- services/: serviços de aplicação (merge do OCR)
- infra/: implementações concretas de IO (Gemini, transportes, stores, secrets)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas
- constants/: headers do contrato HTTP

Padrão: app executa; api adapta; ai decide; utils apoia.
"""
