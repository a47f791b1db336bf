"""Núcleo do sistema: casos de uso, domínio e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: entidades, value objects e erros de domínio
- use_cases/: casos de uso (inputs/outputs, sem IO direto)
- infra/: implementações concretas de IO (stores)
- protocols/: contratos/interfaces dos repositórios
- observability/: correlation_id e métricas

Padrão: app executa; api adapta; config configura; utils apoia.
"""
