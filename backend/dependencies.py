# backend/dependencies.py

"""FastAPI dependencies: current user, model and history store providers."""

from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException

from history import HistoryStore, get_history_store
from runtime import get_llm


@dataclass(frozen=True)
class UserContext:
    """The signed-in user, passed explicitly to every operation that needs it."""
    user_id: str


def get_user_context(x_user_id: Optional[str] = Header(default=None)) -> Optional[UserContext]:
    """The user named by ``X-User-Id``, or None for an anonymous session."""
    user_id = (x_user_id or "").strip()
    return UserContext(user_id=user_id) if user_id else None


def require_user(user: Optional[UserContext] = Depends(get_user_context)) -> UserContext:
    if user is None:
        raise HTTPException(status_code=401, detail="Sign in to view your history")
    return user


def get_llm_provider() -> Callable:
    """
    Returns the model factory rather than a model so routes can validate
    input before a missing credential is reported.
    """
    return get_llm


def get_history_store_provider() -> Callable[[], HistoryStore]:
    return get_history_store


def get_store(provider: Callable[[], HistoryStore] = Depends(get_history_store_provider)) -> HistoryStore:
    return provider()
