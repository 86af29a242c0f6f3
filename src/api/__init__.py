"""API — camada de borda.

Subpastas:
- connectors/: adapters HTTP por serviço externo

NÃO PODE conter: wiring, leitura de env, configuração de logging.
"""
