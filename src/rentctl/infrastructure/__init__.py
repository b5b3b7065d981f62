"""Infrastructure layer — JSON repositories, clock, formatting, fleet.

This layer depends on stdlib, third-party libs (Babel), and domain models.
It must never import from services, commands, or output.
"""
