"""ViewModel package for UI state and command surfaces.

Call context:
    ``postboard/app/main.py`` and ``postboard/web_ui/main.py`` import concrete
    viewmodels from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types and use-case callables
    only. HTTP and thread handling stay in adapters and the app dispatcher.

Responsibilities:
    - Own the observable posts collection and last error message.
    - Expose command intents for the list and add/edit screens.
    - Keep MVVM boundaries explicit by avoiding transport or persistence logic.
"""
