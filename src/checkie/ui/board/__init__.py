"""Board rendering and drag-and-drop interaction."""
