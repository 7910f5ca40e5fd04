"""Application composition layer.

The controller, settings and composition root live here; ``main`` and
``views`` add the Tkinter desktop runtime on top of them.
"""
