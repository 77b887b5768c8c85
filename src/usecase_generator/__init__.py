"""
AI use-case generator package.

Provides:
- Parsing of free-form model replies into "AI Can ..." use-case records
- A single-call generation pipeline against an OpenAI-compatible API
- FastAPI service exposing POST /api/generateUsecase, plus a small CLI
"""
