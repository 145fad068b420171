"""
The MODEL layer contains the static zone catalog.
It has NO knowledge of the GUI (Qt).
"""
