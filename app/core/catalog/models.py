"""
Catalog records as seen by the recommendation core.

Records are built from raw TMDB payloads and never mutated afterwards.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class MediaKind(str, Enum):
    """Kind of catalog title."""

    MOVIE = "movie"
    SERIES = "series"

    @property
    def catalog_path(self) -> str:
        """Path segment TMDB uses for this kind ('movie' or 'tv')."""
        return "movie" if self is MediaKind.MOVIE else "tv"

    @classmethod
    def parse(cls, value: Any) -> Optional["MediaKind"]:
        """
        Parse a media kind from loosely-typed input.

        Accepts 'movie', 'series' and TMDB's 'tv' (case-insensitive).
        Returns None for anything else.
        """
        if isinstance(value, MediaKind):
            return value
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        if normalized == "tv":
            return cls.SERIES
        try:
            return cls(normalized)
        except ValueError:
            return None


# TMDB genre ids for movies and TV, merged (ids do not collide).
GENRE_NAMES_BY_ID: Mapping[int, str] = {
    28: "Action",
    12: "Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    14: "Fantasy",
    36: "History",
    27: "Horror",
    10402: "Music",
    9648: "Mystery",
    10749: "Romance",
    878: "Science Fiction",
    10770: "TV Movie",
    53: "Thriller",
    10752: "War",
    37: "Western",
    10759: "Action & Adventure",
    10762: "Kids",
    10763: "News",
    10764: "Reality",
    10765: "Sci-Fi & Fantasy",
    10766: "Soap",
    10767: "Talk",
    10768: "War & Politics",
}


def _parse_date(value: Any) -> Optional[date]:
    if not value or not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


@dataclass(frozen=True)
class CatalogItem:
    """
    A single catalog title.

    Attributes:
        id: TMDB identifier
        title: Display title ('title' for movies, 'name' for series)
        overview: Synopsis, empty string when TMDB has none
        media_kind: Movie or series
        genre_ids: TMDB genre ids
        genre_names: Genre names, resolved from ids when TMDB only sent ids
        release_date: First release / first air date
        popularity: TMDB popularity
        rating: TMDB vote average (0-10)
        poster_ref: TMDB poster path
    """

    id: int
    title: str
    overview: str
    media_kind: MediaKind
    genre_ids: Tuple[int, ...] = ()
    genre_names: Tuple[str, ...] = ()
    release_date: Optional[date] = None
    popularity: float = 0.0
    rating: float = 0.0
    poster_ref: Optional[str] = None

    @classmethod
    def from_record(
        cls,
        record: Dict[str, Any],
        media_kind: Optional[MediaKind] = None,
    ) -> "CatalogItem":
        """
        Map a raw TMDB record (search hit, list entry or details payload).

        The media kind comes from the record's 'media_type' when present,
        then from the caller, then from which date field the record carries.
        """
        kind = MediaKind.parse(record.get("media_type")) or media_kind
        if kind is None:
            kind = MediaKind.SERIES if record.get("first_air_date") else MediaKind.MOVIE

        genres = record.get("genres") or []
        if genres:
            genre_ids = tuple(int(g["id"]) for g in genres if isinstance(g, dict) and "id" in g)
            genre_names = tuple(str(g["name"]) for g in genres if isinstance(g, dict) and g.get("name"))
        else:
            genre_ids = tuple(int(g) for g in record.get("genre_ids") or [])
            genre_names = tuple(GENRE_NAMES_BY_ID[g] for g in genre_ids if g in GENRE_NAMES_BY_ID)

        return cls(
            id=int(record["id"]),
            title=record.get("title") or record.get("name") or "",
            overview=record.get("overview") or "",
            media_kind=kind,
            genre_ids=genre_ids,
            genre_names=genre_names,
            release_date=_parse_date(record.get("release_date") or record.get("first_air_date")),
            popularity=_as_float(record.get("popularity")),
            rating=_as_float(record.get("vote_average")),
            poster_ref=record.get("poster_path"),
        )
