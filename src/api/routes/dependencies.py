"""Dependências das rotas: usuário autenticado e container.

A autenticação acontece no gateway, que repassa a identidade nos
headers X-User-Id, X-User-Name e X-User-Role.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import HTTPException, Request, status

from app.bootstrap.dependencies import Container

USER_ID_HEADER = "x-user-id"
USER_NAME_HEADER = "x-user-name"
USER_ROLE_HEADER = "x-user-role"


@dataclass(frozen=True, slots=True)
class CurrentUser:
    id: str
    name: str | None = None
    role: str | None = None


def get_current_user(request: Request) -> CurrentUser:
    user_id = (request.headers.get(USER_ID_HEADER) or "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Usuário não autenticado",
        )
    return CurrentUser(
        id=user_id,
        name=request.headers.get(USER_NAME_HEADER) or None,
        role=request.headers.get(USER_ROLE_HEADER) or None,
    )


def get_container(request: Request) -> Container:
    return request.app.state.container


def is_privileged(container: Container, user: CurrentUser) -> bool:
    return container.auth.is_privileged(user.role)


def require_privileged(container: Container, user: CurrentUser) -> None:
    if not is_privileged(container, user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Acesso negado")
