"""
The VIEW layer: PySide6 widgets. It reads from the SelectionStore and turns
user events into store calls; it holds no selection state of its own.
"""
