"""Catalogue search parameters derived from recommended genre tags.

The first tag of a recommendation is treated as the genre every result must
match; the remaining tags only influence local ranking.  A few single-genre
intents also exclude genres with an opposite mood so the catalogue does not
return, say, family animation for a thriller request.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

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

ACTION = 28
ADVENTURE = 12
ANIMATION = 16
COMEDY = 35
CRIME = 80
DOCUMENTARY = 99
DRAMA = 18
FAMILY = 10751
FANTASY = 14
HISTORY = 36
HORROR = 27
MUSIC = 10402
MYSTERY = 9648
ROMANCE = 10749
SCIENCE_FICTION = 878
THRILLER = 53
WAR = 10752
WESTERN = 37

GENRE_NAMES: Mapping[int, str] = {
    ACTION: "Action",
    ADVENTURE: "Adventure",
    ANIMATION: "Animation",
    COMEDY: "Comedy",
    CRIME: "Crime",
    DOCUMENTARY: "Documentary",
    DRAMA: "Drama",
    FAMILY: "Family",
    FANTASY: "Fantasy",
    HISTORY: "History",
    HORROR: "Horror",
    MUSIC: "Music",
    MYSTERY: "Mystery",
    ROMANCE: "Romance",
    SCIENCE_FICTION: "Sci-Fi",
    THRILLER: "Thriller",
    WAR: "War",
    WESTERN: "Western",
}

_COMEDY_ONLY_EXCLUDES = (
    DRAMA,
    ROMANCE,
    THRILLER,
    HORROR,
    CRIME,
    ACTION,
    FANTASY,
    ADVENTURE,
    SCIENCE_FICTION,
    MUSIC,
    DOCUMENTARY,
    HISTORY,
    MYSTERY,
    WAR,
)
_THRILLER_ONLY_EXCLUDES = (
    COMEDY,
    FAMILY,
    ANIMATION,
    MUSIC,
    ADVENTURE,
    FANTASY,
    HISTORY,
    DOCUMENTARY,
    ROMANCE,
)
_ACTION_ONLY_EXCLUDES = (FAMILY, ANIMATION, COMEDY, DRAMA, ROMANCE, MUSIC)
_ROMANCE_ONLY_EXCLUDES = (
    THRILLER,
    HORROR,
    ACTION,
    CRIME,
    SCIENCE_FICTION,
    MYSTERY,
    WAR,
)


def genre_names(tags: Iterable[int]) -> List[str]:
    """Map genre identifiers to display names, ``"Unknown"`` when unmapped."""

    return [GENRE_NAMES.get(tag, "Unknown") for tag in tags]


def build_query_from_genres(
    tags: Sequence[int],
    *,
    sort_by: Optional[str] = None,
    page: Optional[int] = None,
) -> Dict[str, str]:
    """Return discover-style query parameters for a recommendation.

    Raises
    ------
    ValueError
        If *tags* is empty; there is no primary genre to require.
    """

    if not tags:
        raise ValueError("At least one genre tag is required to build a query")

    primary, *secondary = tags
    params: Dict[str, str] = {"with_genres": str(primary)}

    exclude: List[int] = []
    if primary == THRILLER:
        exclude.extend((COMEDY, FAMILY, ANIMATION))
    if primary == ACTION and not _shares_any(secondary, (COMEDY, ADVENTURE, CRIME)):
        exclude.extend((FAMILY, ANIMATION))
    if primary == COMEDY and not _shares_any(secondary, (ROMANCE, FAMILY, ANIMATION)):
        exclude.extend((DRAMA, ROMANCE))

    if exclude:
        params["without_genres"] = _join(exclude)
    _apply_paging(params, sort_by, page)
    return params


def build_comedy_only_query(
    *, sort_by: Optional[str] = None, page: Optional[int] = None
) -> Dict[str, str]:
    return _single_genre_query(COMEDY, _COMEDY_ONLY_EXCLUDES, sort_by, page)


def build_thriller_only_query(
    *, sort_by: Optional[str] = None, page: Optional[int] = None
) -> Dict[str, str]:
    return _single_genre_query(THRILLER, _THRILLER_ONLY_EXCLUDES, sort_by, page)


def build_action_only_query(
    *, sort_by: Optional[str] = None, page: Optional[int] = None
) -> Dict[str, str]:
    return _single_genre_query(ACTION, _ACTION_ONLY_EXCLUDES, sort_by, page)


def build_romance_only_query(
    *, sort_by: Optional[str] = None, page: Optional[int] = None
) -> Dict[str, str]:
    return _single_genre_query(ROMANCE, _ROMANCE_ONLY_EXCLUDES, sort_by, page)


def score_movie_genres(movie_genres: Iterable[int], tags: Sequence[int]) -> int:
    """Score a movie: three points for the primary genre, one per secondary."""

    if not tags:
        return 0
    available = set(movie_genres)
    primary, *secondary = tags
    score = 3 if primary in available else 0
    score += sum(1 for tag in secondary if tag in available)
    return score


def rank_movies(
    movies: Iterable[Mapping[str, Any]], tags: Sequence[int]
) -> List[Mapping[str, Any]]:
    """Order catalogue entries by descending genre score, keeping ties stable."""

    return sorted(
        movies,
        key=lambda movie: score_movie_genres(movie.get("genre_ids", ()), tags),
        reverse=True,
    )


def _single_genre_query(
    genre: int,
    exclude: Sequence[int],
    sort_by: Optional[str],
    page: Optional[int],
) -> Dict[str, str]:
    params = {"with_genres": str(genre), "without_genres": _join(exclude)}
    _apply_paging(params, sort_by, page)
    return params


def _apply_paging(
    params: Dict[str, str], sort_by: Optional[str], page: Optional[int]
) -> None:
    if sort_by:
        params["sort_by"] = sort_by
    if page:
        params["page"] = str(page)


def _shares_any(values: Iterable[int], candidates: Iterable[int]) -> bool:
    return not set(values).isdisjoint(candidates)


def _join(values: Iterable[int]) -> str:
    return ",".join(str(value) for value in values)
