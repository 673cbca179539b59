"""Application composition layer for the Tkinter GUI.

Modules in this package wire views, view models, adapters, and use cases
into the runnable desktop app without placing business logic in views.
"""
