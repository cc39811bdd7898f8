"""The running GameSession, handed to routes through ``Depends``."""

from __future__ import annotations

from worms.api.session import GameSession

_session: GameSession | None = None


def set_game_session(session: GameSession | None) -> None:
    """Install *session* for the app's lifetime; ``None`` on shutdown."""
    global _session
    _session = session


def get_game_session() -> GameSession:
    session = _session
    if session is None:
        raise RuntimeError("No match is loaded; create the app with create_app() and run its lifespan.")
    return session
