"""App — orquestração do webhook e wiring das dependências.

Subpastas:
- bootstrap/: composition root (inicialização, validação de settings, factories)
- coordinators/: fluxo pós-verificação (extrair → decidir → encaminhar)
- protocols/: contratos consumidos pelo coordinator
- observability/: correlation_id propagado nos logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
