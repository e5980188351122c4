from __future__ import annotations

from fastapi import Request

from foalwatch.config.settings import Settings, get_settings


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    return settings or get_settings()
