"""
The APP layer: QApplication setup, main window and widgets.
"""
