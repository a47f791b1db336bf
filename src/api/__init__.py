"""Borda HTTP da plataforma.

Responsabilidades:
- Receber requests do frontend (via gateway autenticado)
- Extrair identidade do usuário dos headers
- Validar payloads de entrada (pydantic)
- Delegar para use cases e montar o envelope de resposta

Subpastas:
- routes/: endpoints HTTP por módulo (todos, relatos, health)

NÃO PODE conter: regras de domínio, acesso direto ao armazenamento.
"""
