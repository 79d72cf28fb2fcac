"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Diet / exercise mode buttons
    - Transcript display filtered by the selected mode
    - Markdown rendering of replies and a loading spinner

Contains minimal business logic. Delegates all state to ChatSession.
Remains a pure presentation layer.
"""
