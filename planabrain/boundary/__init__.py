"""
Boundary adapters: index file, memory files, source loading and Gemini clients.
"""
