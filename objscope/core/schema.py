"""
objscope errors

Failures surface straight from the reflective operation to the caller.
"""


class InvalidInput(TypeError):
    """
    Raised when a value has no object representation for the requested
    reflective operation (own property names or ancestor information of None).
    """
