"""
Pydantic schema definitions.

``unit`` holds both the full stored shape of a roster entry and the
slimmed-down view returned over HTTP.
"""
