# plugins/__init__.py
"""Example command plugins loaded by easyconsole.interface.loader."""
