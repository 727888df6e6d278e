from .entity_common import Entity, Hitbox
from .player_entity import Player, PlayerFrameEvents
from .enemy_entities import Enemy, Skeleton

__all__ = [
    'Player', 'PlayerFrameEvents',
    'Enemy', 'Skeleton',
    'Entity', 'Hitbox',
]
