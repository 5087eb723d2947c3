"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations of ``UserPort`` (the GigaDB REST adapter
    and its offline mock) plus the shared HTTP transport.

Dependencies:
    Individual submodules depend on ``requests`` and domain protocol
    definitions.

Call context:
    Imported by ``gigadb_ui.app.controller`` for runtime wiring and by tests
    for transport-level behavior verification.
"""
