"""ViewModel package for UI state and command surfaces.

Call context:
    ``infralib/web_ui/runtime.py`` builds one set of viewmodels per browser
    page and binds NiceGUI callbacks to their state transitions.

Dependencies:
    Modules in this package depend on domain types and lightweight formatting
    helpers only. I/O adapters and use-case orchestration remain outside.

Responsibilities:
    - Own catalog fetch state and overlay selection state.
    - Format item fields into view-facing labels.
    - Keep MVVM boundaries explicit by avoiding transport or persistence logic.
"""
