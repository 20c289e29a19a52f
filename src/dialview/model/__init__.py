"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with the dial geometry, the selection state and pointer hit-testing.
"""
