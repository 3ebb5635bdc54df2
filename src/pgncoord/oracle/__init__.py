"""Position oracle: board state behind an interface."""

from pgncoord.oracle.board_oracle import BoardOracle
from pgncoord.oracle.interfaces import IPositionOracle

__all__ = ["BoardOracle", "IPositionOracle"]
