"""Infrastructure layer: timezone database and calendar arithmetic.

This layer depends on stdlib ``zoneinfo`` (with ``tzdata`` as the data
source where the OS has none) and on domain value types only.
It must never import from services, commands, config, or output.
"""
