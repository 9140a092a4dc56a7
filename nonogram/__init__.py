"""Terminal nonogram puzzle game with boards, a uniqueness-checking solver, hints and an editor."""

__version__ = "0.1.0"
__all__ = ["console", "drawing", "game", "play_scene", "solver", "viewer"]