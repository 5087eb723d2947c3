"""Application composition layer for the GigaDB browser.

Controllers in this package own request orchestration and view state
(debounce, stale-response guards, mutation flows) and are hosted by the
NiceGUI pages in ``gigadb_ui.web_ui`` without placing logic in views.
"""
