import logging
import math
import random
from typing import List, Optional, Sequence

from fixturedesk.core.exceptions import (
    GroupingConstraintError,
    GroupingInvariantError,
    NotEnoughPlayersError,
)
from fixturedesk.models.fixture_model import Group

logger = logging.getLogger(__name__)

def group_label(index: int) -> str:
    """0 -> "A", 25 -> "Z", 26 -> "AA", 27 -> "AB", ..."""
    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label

def group_players(
    player_ids: Sequence[str],
    min_group_size: int,
    max_group_size: int,
    rng: Optional[random.Random] = None,
) -> List[Group]:
    """
    Splits the players into the fewest groups whose sizes all fall within
    [min_group_size, max_group_size].

    Players are shuffled and then dealt round-robin into the groups, so group
    sizes differ by at most one. Raises NotEnoughPlayersError or
    GroupingConstraintError when no valid split exists.
    """
    if min_group_size <= 0 or max_group_size < min_group_size:
        raise ValueError(
            f"Invalid group size bounds: min={min_group_size}, max={max_group_size}"
        )

    player_count = len(player_ids)
    if player_count < min_group_size:
        logger.warning(
            "Cannot group %d players: minimum group size is %d", player_count, min_group_size
        )
        raise NotEnoughPlayersError(
            f"Not enough players to form a group: {player_count} player(s), "
            f"minimum group size is {min_group_size}.",
            player_count, min_group_size, max_group_size,
        )

    min_groups = math.ceil(player_count / max_group_size)
    max_groups = player_count // min_group_size
    if min_groups > max_groups:
        logger.warning(
            "Cannot group %d players within sizes %d..%d",
            player_count, min_group_size, max_group_size,
        )
        raise GroupingConstraintError(
            f"Cannot form valid groups with {player_count} players: every group must have "
            f"between {min_group_size} and {max_group_size} players. "
            "Adjust the player count or the group size limits.",
            player_count, min_group_size, max_group_size,
        )

    group_count = min_groups

    shuffled = list(player_ids)
    (rng or random.Random()).shuffle(shuffled)

    buckets: List[List[str]] = [[] for _ in range(group_count)]
    for i, player_id in enumerate(shuffled):
        buckets[i % group_count].append(player_id)

    groups = [
        Group(name=f"Group {group_label(i)}", player_ids=members)
        for i, members in enumerate(buckets)
    ]

    for group in groups:
        size = len(group.player_ids)
        if size < min_group_size or size > max_group_size:
            logger.error(
                "%s has %d players, outside %d..%d (total %d, %d groups)",
                group.name, size, min_group_size, max_group_size, player_count, group_count,
            )
            raise GroupingInvariantError(
                f"{group.name} has {size} players, outside the allowed range "
                f"{min_group_size}..{max_group_size}."
            )

    logger.debug("Grouped %d players into %d groups", player_count, group_count)
    return groups
