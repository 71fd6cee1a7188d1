# Services package init
"""
Noteful Backend — Services Layer
==================================

What:  Logic sitting between routes (HTTP) and the database (persistence).
How:   Services accept a session plus plain values and return ORM records or
       raise application exceptions. Routes stay thin.

Service Inventory:
    - RecordStore: Shared async CRUD contract (get_all, get_by_id, insert, update, delete)
    - FolderService / NoteService: The store for each resource
    - validation: Per-field presence checks for request bodies
    - sanitizer: HTML escaping of outbound free-text fields
"""
