"""Módulo AI do NetworkAI.

Camada de IA sem IO de rede:
- models: contratos das 4 ações (getNetworkingAdvice, extractContactFromCard,
  getSuggestedTopics, getProfileSummary)
- prompts: construtores puros de prompt e schemas de resposta
- services: ActionDispatcher (lado servidor) e NetworkingAssistant (lado cliente)
- rules: política de erro e respostas padrão por ação
- utils: extração de JSON e sanitização para logs

Provedor HTTP e transportes ficam em app/infra/ai.
"""
