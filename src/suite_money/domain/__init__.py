"""Domain model: fixed-point decimal arithmetic, allocation and the monetary package."""
