"""
The APP layer is the PySide6 dashboard: the Store with Qt signals, the frame
loop and the widgets. It reads from the engine and feeds it stick vectors.
"""
