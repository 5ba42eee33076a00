"""
Project search package.

This package provides the relevance search stack:
- fields: Field roles and ordered key aliases for property bags
- scoring: Declarative per-field weight table
- engine: Match, score and rank features against a free-text query
"""
