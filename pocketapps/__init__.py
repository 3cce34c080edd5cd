"""Small terminal games and tools: Wumpus, shootout, coffee shop, catalog, a linked list and a stair counter."""

__version__ = "0.1.0"