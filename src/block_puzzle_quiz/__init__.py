"""Block puzzle with trivia-quiz interruptions.

Drag polyomino pieces onto a square grid, clear full rows and columns and
answer a quiz question every few placements.
"""

__version__ = "0.1.0"
