"""PyQt6 user interface: board scene, dialogs and main window."""
