"""
The MODEL layer contains the plain geometric data structures.
It has NO knowledge of the functions built on top of it.
"""
