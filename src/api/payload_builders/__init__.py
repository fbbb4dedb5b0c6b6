"""Payload builders: saída da CLI.

Estrutura:
- events/: documento JSON e cartão de terminal a partir de EventBuckets
"""

__all__: list[str] = []
