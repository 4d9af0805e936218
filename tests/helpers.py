"""Record builders shared by the test modules."""

from __future__ import annotations

from rcfpl.models import PlayerMetricRecord


def make_record(
    player_id: int,
    name: str = "Player",
    *,
    team: str = "ARS",
    position: str = "MID",
    appearances: int = 10,
    returns: int = 4,
    blanks: int = 3,
    hauls: int = 1,
    points_average: float = 4.5,
    points_std_dev: float = 3.0,
    consistency_score: float = 0.0,
) -> PlayerMetricRecord:
    return PlayerMetricRecord(
        id=player_id,
        name=name,
        team=team,
        position=position,
        appearances=appearances,
        return_count=returns,
        return_rate_raw=100.0 * returns / appearances if appearances else 0.0,
        return_rate_smoothed=100.0 * (returns + 2) / (appearances + 4),
        blank_count=blanks,
        blank_rate=100.0 * blanks / appearances if appearances else 0.0,
        haul_count=hauls,
        points_average=points_average,
        points_std_dev=points_std_dev,
        consistency_score=consistency_score,
    )


def sample_pool() -> list[PlayerMetricRecord]:
    return [
        make_record(1, "Salah", team="LIV", position="MID", appearances=20, returns=14, blanks=2, hauls=6, points_average=8.1, points_std_dev=4.2, consistency_score=91),
        make_record(2, "Haaland", team="MCI", position="FWD", appearances=18, returns=11, blanks=4, hauls=5, points_average=7.4, points_std_dev=5.1, consistency_score=77),
        make_record(3, "Saka", team="ARS", position="MID", appearances=19, returns=10, blanks=3, hauls=3, points_average=6.2, points_std_dev=3.4, consistency_score=74),
        make_record(4, "Raya", team="ARS", position="GKP", appearances=20, returns=8, blanks=6, hauls=0, points_average=4.6, points_std_dev=2.5, consistency_score=58),
        make_record(5, "Saliba", team="ARS", position="DEF", appearances=20, returns=9, blanks=5, hauls=1, points_average=5.0, points_std_dev=3.0, consistency_score=63),
        make_record(6, "Alexander-Arnold", team="LIV", position="DEF", appearances=4, returns=2, blanks=1, hauls=1, points_average=5.5, points_std_dev=4.0, consistency_score=0),
        make_record(7, "Isak", team="NEW", position="FWD", appearances=17, returns=9, blanks=5, hauls=4, points_average=6.3, points_std_dev=4.8, consistency_score=55),
    ]
