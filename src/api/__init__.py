"""API: camada HTTP de consulta das mensagens capturadas.

Subpastas:
- routes/: endpoints HTTP (emails, health, interface web)
- static/: arquivos da interface web

NÃO PODE conter: protocolo SMTP, regras de sessão, acesso direto ao listener.
"""
