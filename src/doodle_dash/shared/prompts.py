"""
Prompt list for Doodle Dash rounds.

Each round picks one entry uniformly at random.
"""

PROMPTS = [
    "A cat wearing a hat",
    "A house on a hill",
    "A rocket ship",
    "A happy sun",
    "A fish in a bowl",
    "A tree with apples",
    "A bicycle",
    "A snowman",
    "A pirate ship",
    "A slice of pizza",
    "A dog chasing a ball",
    "A castle with flags",
    "An umbrella in the rain",
    "A cup of coffee",
    "A butterfly",
    "A robot waving hello",
    "A hot air balloon",
    "A turtle on a beach",
    "A guitar",
    "A mountain at sunset",
    "An ice cream cone",
    "A dragon breathing fire",
    "A car on a road",
    "A flower in a pot",
    "An owl on a branch",
]

__all__ = ["PROMPTS"]
