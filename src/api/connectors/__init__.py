"""Conectores por provedor — entrada e decodificação de webhooks."""
