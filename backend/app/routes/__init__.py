# Routes package init
"""
Noteful Backend — API Routes Package
======================================

Route Inventory:
    - folders.py: GET/POST /api/folders, GET/PATCH/DELETE /api/folders/{folder_id}
    - notes.py:   GET/POST /api/notes,   GET/PATCH/DELETE /api/notes/{note_id}
    - health.py:  GET /health

Design Principle:
    Routes are THIN: resolve the item, validate the body, call the store,
    serialize (escape) the result, pick the status code. Everything behind
    them is in app.services and app.dependencies.
"""
