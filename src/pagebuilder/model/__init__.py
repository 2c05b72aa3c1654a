"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or of how the exported text is delivered.
It deals with Elements, Geometry, and I/O.
"""
