"""Player layer: engine-backed and random players behind one interface.

Quick start::

    from draughtsai.game import SearchPlayer

    player = SearchPlayer("quiescent", max_depth=8)
    move = player.choose_move(position)
"""

from draughtsai.game.interfaces import IPlayer
from draughtsai.game.player import RandomPlayer, SearchPlayer

__all__ = [
    "IPlayer",
    "RandomPlayer",
    "SearchPlayer",
]
