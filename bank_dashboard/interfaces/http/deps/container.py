"""Container dependency provider."""

from fastapi import Request

from bank_dashboard.core.container import ApplicationContainer


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


__all__ = ["get_container"]
