"""Style plugin definitions — catalog of display styles.

Each definition declares a style's id, theme hooks and supported display
types so the host display system can offer and instantiate it.
"""
