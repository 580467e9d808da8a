"""
Food-Drug Interaction Checker - Source Package

Main modules:
- store: curated interaction knowledge base (read-only, loaded at startup)
- matching: alias resolution and the curated/fallback resolution engine
- extraction: label text flattening and snippet extraction
- providers: external drug label clients (openFDA)
- api: HTTP surface
- utils: configuration management
"""

__version__ = "1.0.0"
