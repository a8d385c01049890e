"""API layer: canonical read surface for placettes, plots and the dashboard.

Key rules:

1. No SQLAlchemy imports - only call repo functions (Session is allowed for type hints)
2. One store query per record request, chosen by filter precedence
3. GeoJSON properties come only from the per-kind exposure tables
4. Store errors propagate unchanged; nothing is retried or cached
"""
