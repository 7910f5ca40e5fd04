"""NiceGUI web runtime: root attachment, render capability, and entrypoint."""
