# Routes package init
"""
QuickNotes — Routes Package
============================

Route Inventory:
    - pages.py:   GET  /                     (index page with create form)
    - notes.py:   GET/POST /notes            (list, create)
                  GET/PUT/POST/DELETE /notes/{id}
                  GET  /notes/{id}/edit      (edit form)
    - health.py:  GET  /health               (service health check)

Routes stay thin: they read the request, call the NoteStore, and hand data
to the TemplateRenderer. Failures are raised, not rendered here; main.py
translates them into error pages.
"""
