"""API — camada de borda e adapters das integrações.

Responsabilidades:
- Receber o webhook do Tally
- Validar assinatura e payload
- Normalizar campos do formulário para o registro interno
- Construir e enviar payloads para o MailerLite

Subpastas:
- connectors/: adapters HTTP por integração
- normalizers/: campos do formulário → NormalizedSubmission
- payload_builders/: construção de payloads para APIs externas
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: orquestração do fluxo de submissão.
"""
