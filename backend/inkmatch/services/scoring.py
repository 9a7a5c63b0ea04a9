from typing import Dict, Iterable, Mapping

from ..schemas.like import ArtistScore, Like


def score(likes: Iterable[Like], tattoo_to_artist: Mapping[str, str]) -> Dict[str, ArtistScore]:
    """Count a viewer's likes per owning artist.

    Likes whose tattoo has no entry in ``tattoo_to_artist`` (deleted, or never
    resolved) are skipped. The score is the unweighted like count. The
    result keeps the order in which artists were first encountered.
    """
    scores: Dict[str, ArtistScore] = {}
    for like in likes:
        artist_id = tattoo_to_artist.get(like.tattoo_id)
        if not artist_id:
            continue
        entry = scores.get(artist_id)
        if entry is None:
            entry = scores[artist_id] = ArtistScore(artist_id=artist_id)
        entry.liked_tattoos += 1
        entry.score = entry.liked_tattoos
    return scores
