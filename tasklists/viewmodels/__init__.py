"""View builders and the immutable descriptions they produce.

Call context:
    ``tasklists/app/controller.py`` calls the builders on every re-render and
    hands their output to a render capability (Tk, NiceGUI, or in-memory).

Responsibilities:
    - Turn read-only snapshots plus callbacks into view descriptions.
    - Keep presentation tokens (markers, count text, empty state) in one place.
    - Hold no state between calls and never touch widgets directly.
"""
