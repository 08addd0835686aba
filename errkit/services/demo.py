"""Movie catalog demo producing realistic nested errors.

`pick_movies` asks a flaky database for movies of a genre and picks a few.
Depending on the database's roll it returns movies, finds none, or fails with
a connection problem wrapped twice:

    MovieError.caught
    └─ DatabaseError.operation_failed(context: loading action movies)
       └─ ConnectionRefusedError [Class]
          └─ userFriendlyMessage: "The server refused the connection. ..."
"""

from __future__ import annotations

import errno
import random
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from errkit.builtin.database_error import OperationFailed
from errkit.chain.throwable import Catching, Throwable

__all__ = [
    "Genre",
    "Movie",
    "MovieError",
    "NoMoviesFound",
    "NotEnoughMovies",
    "MovieDatabase",
    "Scenario",
    "pick_movies",
    "database_for",
]


class Genre(StrEnum):
    ACTION = "action"
    ANIME = "anime"
    BOLLYWOOD = "bollywood"
    COMEDY = "comedy"
    DRAMA = "drama"


@dataclass(frozen=True, slots=True)
class Movie:
    title: str
    release_year: int


_MOVIES = (
    Movie("Harry Potter and the Philosopher's Stone", 2001),
    Movie("Harry Potter and the Chamber of Secrets", 2002),
    Movie("Harry Potter and the Prisoner of Azkaban", 2004),
    Movie("Harry Potter and the Goblet of Fire", 2005),
    Movie("Harry Potter and the Order of the Phoenix", 2007),
    Movie("Harry Potter and the Half-Blood Prince", 2009),
    Movie("Harry Potter and the Deathly Hallows - Part 1", 2010),
    Movie("Harry Potter and the Deathly Hallows - Part 2", 2011),
)


class MovieError(Throwable, Catching):
    """Errors raised while picking movies."""


@dataclass(eq=False)
class NoMoviesFound(MovieError, case="no_movies_found"):
    genre: Genre

    @property
    def user_friendly_message(self) -> str:
        return f"No movies found matching the genre '{self.genre.value}'."


@dataclass(eq=False)
class NotEnoughMovies(MovieError, case="not_enough_movies"):
    genre: Genre
    requested: int
    available: int

    @property
    def user_friendly_message(self) -> str:
        return (
            f"Not enough movies matching the genre '{self.genre.value}' "
            f"({self.available} available, {self.requested} requested)."
        )


class Scenario(StrEnum):
    RANDOM = "random"
    FAILING = "failing"
    EMPTY = "empty"
    FULL = "full"


class MovieDatabase:
    """A database whose answer depends on a roll in [0, 100)."""

    def __init__(self, roll: Callable[[], int]) -> None:
        self._roll = roll

    def load_movies(self, genre: Genre) -> list[Movie]:
        value = self._roll()
        if value < 33:
            raise OperationFailed(context=f"loading {genre.value} movies") from ConnectionRefusedError(
                errno.ECONNREFUSED, "Connection refused"
            )
        if value < 66:
            return []
        return list(_MOVIES)


def database_for(scenario: Scenario, seed: int | None = None) -> MovieDatabase:
    match scenario:
        case Scenario.FAILING:
            return MovieDatabase(lambda: 0)
        case Scenario.EMPTY:
            return MovieDatabase(lambda: 50)
        case Scenario.FULL:
            return MovieDatabase(lambda: 99)
        case _:
            rng = random.Random(seed)
            return MovieDatabase(lambda: rng.randrange(100))


def pick_movies(
    database: MovieDatabase,
    genre: Genre,
    count: int,
    rng: random.Random | None = None,
) -> list[Movie]:
    """Pick `count` distinct movies of a genre.

    Raises:
        MovieError: Database failures arrive wrapped as `MovieError.caught`.
    """
    movies = MovieError.catch(database.load_movies, genre)
    if not movies:
        raise NoMoviesFound(genre=genre)
    if count > len(movies):
        raise NotEnoughMovies(genre=genre, requested=count, available=len(movies))
    return (rng or random.Random()).sample(movies, count)
