"""Catalogue query construction from recommendation tags."""

from .genre_query import (
    GENRE_NAMES,
    build_action_only_query,
    build_comedy_only_query,
    build_query_from_genres,
    build_romance_only_query,
    build_thriller_only_query,
    genre_names,
    rank_movies,
    score_movie_genres,
)

__all__ = [
    "GENRE_NAMES",
    "build_action_only_query",
    "build_comedy_only_query",
    "build_query_from_genres",
    "build_romance_only_query",
    "build_thriller_only_query",
    "genre_names",
    "rank_movies",
    "score_movie_genres",
]
