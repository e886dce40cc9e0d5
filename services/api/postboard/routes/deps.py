"""Request dependencies shared by the routers.

The stores and settings belong to the application instance (see
`postboard.main.create_app`), so routes read them from `app.state`.
"""

from fastapi import Request

from postboard.settings import Settings
from postboard.stores.memory import Repositories


def get_repositories(request: Request) -> Repositories:
    return request.app.state.repositories


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
