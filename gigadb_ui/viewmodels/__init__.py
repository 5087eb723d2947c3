"""ViewModel package for view-facing projections.

Call context:
    ``gigadb_ui/web_ui/main.py`` turns controller state into the DTOs defined
    here before drawing anything.

Dependencies:
    Modules in this package depend on domain types and formatting helpers
    only. I/O adapters and request orchestration remain outside.
"""
