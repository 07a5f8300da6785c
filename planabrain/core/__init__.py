"""
Core business logic: retrieval, RAG pipelines and web-search chat.
"""
