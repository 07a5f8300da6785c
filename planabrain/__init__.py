"""
planabrain: local retrieval-augmented question answering.

Ingests a directory of text/code files into a JSON vector index and answers
questions from that index or with a web-search grounded Gemini model.
"""

__version__ = "0.1.0"
