"""
Common utility functions used by various packages
"""


def clamp(value: float, low: float, high: float) -> float:
    """
    Limit value to the closed interval [low, high]
    """
    return max(low, min(value, high))
