"""Application services layer (wiring and integrations).

Services assemble infrastructure and domain objects for a host UI. They should
avoid UI concerns.
"""

from users_app.services.shared_module import SharedModule

__all__ = ["SharedModule"]
