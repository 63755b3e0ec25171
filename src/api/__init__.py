"""API — camada de borda e adapters de provedores.

Responsabilidades:
- Receber webhooks de provedores externos (GitHub)
- Decodificar e normalizar payloads para modelos internos
- Validar entradas (nome do módulo)
- Construir as respostas JSON

Subpastas:
- connectors/: decodificação do corpo por provedor
- normalizers/: conversão de payloads externos → modelos internos
- payload_builders/: construção das respostas JSON
- validators/: validação de entradas
- routes/: endpoints HTTP (webhooks, health)

NÃO PODE conter: políticas de registro nem acesso direto aos stores.
"""
