"""
The MODEL layer contains pure data structures and the animation logic.
It has NO knowledge of the GUI (Qt).
It deals with raindrop stages, placement and the sprites they render to.
"""
