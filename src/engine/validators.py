"""
Pass the Pigs - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Collection

MAX_NAME_LENGTH = 30


def validate_player_name(name: str, existing: Collection[str] = ()) -> str:
    """
    Validate and normalize a player's display name.

    Args:
        name: Name as typed by the user
        existing: Names already registered in the game

    Returns:
        Name with surrounding whitespace removed

    Raises:
        ValueError: If the name is empty, too long, or already taken
    """
    if not isinstance(name, str):
        raise ValueError(f"Player name must be a string, got {type(name).__name__}.")

    cleaned = name.strip()
    if not cleaned:
        raise ValueError("Player name cannot be empty.")

    if len(cleaned) > MAX_NAME_LENGTH:
        raise ValueError(
            f"Player name must be at most {MAX_NAME_LENGTH} characters, got {len(cleaned)}."
        )

    if cleaned in existing:
        raise ValueError(f"Player name {cleaned!r} is already taken.")

    return cleaned


def validate_player_count(count: int, minimum: int = 2) -> int:
    """
    Validate number of players before starting.

    Args:
        count: Number of registered players
        minimum: Fewest players that can start a game

    Returns:
        Validated count

    Raises:
        ValueError: If there are too few players
    """
    if not isinstance(count, int):
        raise ValueError(f"Player count must be an integer, got {type(count).__name__}.")

    if count < minimum:
        raise ValueError(f"At least {minimum} players are needed to start, got {count}.")

    return count


def validate_target_score(score: int) -> int:
    """
    Validate target score for a game.

    Raises:
        ValueError: If score is not a positive integer
    """
    if not isinstance(score, int) or isinstance(score, bool):
        raise ValueError(f"Target score must be an integer, got {type(score).__name__}.")

    if score <= 0:
        raise ValueError(f"Target score must be positive, got {score}.")

    return score
