"""
Parking Spot Allocator

In-memory parking allocation: vehicles enter through a gate, a selection
strategy assigns them a free spot of their category, and the spot is
released when they leave.
"""

__version__ = "1.0.0"
