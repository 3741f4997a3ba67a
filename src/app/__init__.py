"""App: orquestração, domínio e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: entidades (Message)
- infra/: implementações concretas (store em memória)
- protocols/: contratos/interfaces
- observability/: contexto de sessão para logs estruturados

Padrão: app executa; api adapta; smtp fala o protocolo; utils apoia.
"""
