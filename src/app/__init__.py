"""App — wiring e contratos do cliente Scheduler.

Subpastas:
- bootstrap/: composition root (factories, inicialização de logging)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs

Padrão: app conecta; api faz IO; config configura.
"""
